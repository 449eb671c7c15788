from __future__ import annotations
import logging
import pygame
from typing import List, NamedTuple, Optional

from .world import World
from .player import Player
from .renderer import Renderer
from .caster import RayCaster, make_ray_caster
from .geometry import Intersection, Segment
from .projection import Strip, project
from .config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    FRAME_INTERVAL_MS,
    WINDOW_TITLE,
    MOVE_SPEED,
    ROT_SPEED,
    FOV,
    RAY_COUNT,
    SIGHT_DISTANCE,
    ZOOM,
    RAYCAST_BACKEND,
)
from .input_handler import InputHandler

logger = logging.getLogger(__name__)


class Frame(NamedTuple):
    """
    Output of one simulation step. rays and intersections are parallel
    (intersections[i] is the nearest hit of rays[i], or None); each strip
    records the ray index it came from.
    """

    rays: List[Segment]
    intersections: List[Optional[Intersection]]
    strips: List[Strip]


class Game:
    """Main Game class: handles initialization, loop, and high-level coordination."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        world: Optional[World] = None,
        caster: Optional[RayCaster] = None,
    ) -> None:
        pygame.init()
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.world = world or World()
        # The map view matches the world's declared size
        self.renderer = Renderer(
            (int(self.world.width), int(self.world.height)),
            (self.screen_width, self.screen_height),
        )
        self.screen = pygame.display.set_mode(self.renderer.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        # Target frames per second derived from the frame interval
        self.fps = 1000 // FRAME_INTERVAL_MS
        self.player = Player.from_pose(
            self.world.player_start, move_speed=MOVE_SPEED, rot_speed=ROT_SPEED
        )
        self.caster = caster or make_ray_caster(
            RAYCAST_BACKEND,
            fov=FOV,
            ray_count=RAY_COUNT,
            sight_distance=SIGHT_DISTANCE,
        )
        self.zoom = ZOOM
        self.input = InputHandler()
        self.input.enable_key_repeat()
        self.frame = Frame([], [], [])
        # Control flag
        self.running = True

    def handle_events(self) -> None:
        """Process input events and apply movement commands to the player."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        for command in self.input.get_commands():
            self.player.handle(command)

    def step(self) -> Frame:
        """Cast rays from the current pose and project the hits into strips."""
        rays, hits = self.caster.cast(self.world, self.player.pose)
        strips = project(
            hits,
            self.player.position,
            self.screen_width,
            self.screen_height,
            self.caster.ray_count,
            self.zoom,
        )
        self.frame = Frame(rays, hits, strips)
        return self.frame

    def render(self) -> None:
        """Render the latest frame and present it."""
        self.renderer.render(self.screen, self.frame, self.world, self.player)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, step the simulation, and render."""
        logger.info(
            "Starting loop: %d rays, %d walls",
            self.caster.ray_count,
            len(self.world.walls),
        )
        while self.running:
            self.handle_events()
            self.step()
            self.render()
            self.clock.tick(self.fps)
        pygame.quit()
        return
