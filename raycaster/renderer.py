"""
Pygame renderer: top-down map view and projected 3D view drawn side by side.
"""

from __future__ import annotations
import logging
import numpy as np
import pygame
from typing import TYPE_CHECKING, Tuple
from .config import (
    MAP_WIDTH,
    MAP_HEIGHT,
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    WALL_COLOR,
    RAY_COLOR,
    HIT_COLOR,
    PLAYER_COLOR,
    MAP_BACKGROUND_COLOR,
    SKY_EDGE_COLOR,
    SKY_MIDDLE_COLOR,
    PLAYER_RADIUS,
    HIT_RADIUS,
)
from .projection import shade_color

if TYPE_CHECKING:
    from .game import Frame
    from .player import Player
    from .world import World

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def vertical_gradient(
    width: int, height: int, edge: Color, middle: Color
) -> np.ndarray:
    """
    Return a (width, height, 3) uint8 pixel array fading from edge at the
    top to middle at the horizon and back to edge at the bottom.
    """
    t = np.linspace(0.0, 1.0, height) if height > 1 else np.zeros(height)
    weight = np.abs(2.0 * t - 1.0)[:, None]  # 1 at the edges, 0 mid-screen
    edge_arr = np.asarray(edge, dtype=np.float64)
    middle_arr = np.asarray(middle, dtype=np.float64)
    column = middle_arr + (edge_arr - middle_arr) * weight
    pixels = np.broadcast_to(column, (width, height, 3))
    return np.rint(pixels).astype(np.uint8)


class Renderer:
    """Draws a frame onto two offscreen surfaces and blits them to the target."""

    def __init__(
        self,
        map_size: Tuple[int, int] = (MAP_WIDTH, MAP_HEIGHT),
        screen_size: Tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
    ) -> None:
        self.map_w, self.map_h = map_size
        self.w, self.h = screen_size
        self.map_surface = pygame.Surface(map_size)
        self.view_surface = pygame.Surface(screen_size)
        # The background never changes, so build it once
        self.background = pygame.surfarray.make_surface(
            vertical_gradient(self.w, self.h, SKY_EDGE_COLOR, SKY_MIDDLE_COLOR)
        )
        logger.debug(
            "Renderer ready: map %dx%d, view %dx%d",
            self.map_w,
            self.map_h,
            self.w,
            self.h,
        )

    @property
    def window_size(self) -> Tuple[int, int]:
        """Size of a window holding the map view left of the 3D view."""
        return (self.map_w + self.w, max(self.map_h, self.h))

    def render(
        self,
        target: pygame.Surface,
        frame: Frame,
        world: World,
        player: Player,
    ) -> None:
        self.draw_map(frame, world, player)
        self.draw_view(frame)
        target.blit(self.map_surface, (0, 0))
        target.blit(self.view_surface, (self.map_w, 0))

    def draw_map(self, frame: Frame, world: World, player: Player) -> None:
        surf = self.map_surface
        surf.fill(MAP_BACKGROUND_COLOR)
        for a, b in world.walls:
            pygame.draw.line(surf, WALL_COLOR, a, b, 2)
        for a, b in frame.rays:
            pygame.draw.line(surf, RAY_COLOR, a, b, 1)
        for hit in frame.intersections:
            if hit is not None:
                pygame.draw.circle(
                    surf, HIT_COLOR, (hit.x, hit.y), HIT_RADIUS, 1
                )
        pygame.draw.circle(
            surf, PLAYER_COLOR, (player.x, player.y), PLAYER_RADIUS, 1
        )

    def draw_view(self, frame: Frame) -> None:
        surf = self.view_surface
        surf.blit(self.background, (0, 0))
        for strip in frame.strips:
            rect = pygame.Rect(
                round(strip.x),
                round(strip.top),
                max(1, round(strip.x + strip.width) - round(strip.x)),
                round(strip.height),
            )
            surf.fill(shade_color(strip), rect)
