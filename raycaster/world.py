from __future__ import annotations
import os
import json
import math
import logging
from typing import Optional, Sequence, Tuple
from .config import WORLD_FILE, MAP_WIDTH, MAP_HEIGHT
from .geometry import Point, Segment
from .player import Pose

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_START = Pose(75.0, 100.0, 1.5 * math.pi)


def _parse_point(raw) -> Point:
    if not (isinstance(raw, (list, tuple)) and len(raw) == 2):
        raise ValueError(f"Expected [x, y] point, got {raw!r}")
    return Point(float(raw[0]), float(raw[1]))


def _parse_wall(raw) -> Segment:
    if not (isinstance(raw, (list, tuple)) and len(raw) == 2):
        raise ValueError(f"Expected [[x1, y1], [x2, y2]] wall, got {raw!r}")
    return Segment(_parse_point(raw[0]), _parse_point(raw[1]))


class World:
    """Static wall map loaded from an external file (default) or given walls."""

    def __init__(
        self,
        walls: Optional[Sequence[Segment]] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        player_start: Optional[Pose] = None,
    ) -> None:
        if walls is None:
            world_path = os.path.join(os.path.dirname(__file__), WORLD_FILE)
            loaded = self.from_file(world_path)
            walls = loaded.walls
            width = loaded.width if width is None else width
            height = loaded.height if height is None else height
            if player_start is None:
                player_start = loaded.player_start
        self.walls: Tuple[Segment, ...] = tuple(
            Segment.from_coords(*w[0], *w[1]) for w in walls
        )
        for i, wall in enumerate(self.walls):
            if wall.is_degenerate():
                raise ValueError(
                    f"Wall {i} is degenerate: both ends at {tuple(wall.a)}"
                )
        self.width = float(MAP_WIDTH if width is None else width)
        self.height = float(MAP_HEIGHT if height is None else height)
        self.player_start = player_start or DEFAULT_PLAYER_START

    @classmethod
    def from_file(cls, path: str) -> World:
        """
        Load a world from JSON with keys "walls" (list of [[x1, y1], [x2, y2]]),
        optional "width"/"height" and optional "player" {"pos": [x, y],
        "angle": degrees}.
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
            walls = [_parse_wall(w) for w in data.get("walls", [])]
            start = DEFAULT_PLAYER_START
            pl = data.get("player")
            if isinstance(pl, dict):
                pos = _parse_point(pl.get("pos", [start.x, start.y]))
                ang = pl.get("angle")
                angle = (
                    math.radians(float(ang)) if ang is not None else start.angle
                )
                start = Pose(pos.x, pos.y, angle)
            width = float(data.get("width", MAP_WIDTH))
            height = float(data.get("height", MAP_HEIGHT))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.error("Failed to load world map from %s: %s", path, e)
            raise RuntimeError(f"Failed to load world map from {path}: {e}")
        world = cls(walls, width=width, height=height, player_start=start)
        logger.info("Loaded %d walls from %s", len(world.walls), path)
        return world
