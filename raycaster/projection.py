"""
Projection of per-ray wall hits into vertical screen strips.

Strip height and brightness both scale with zoom / distance. This is an
inverse-distance approximation of perspective, not a pinhole camera: there
is no fish-eye correction, so flat walls bow slightly towards the edges.
"""

from __future__ import annotations
from typing import List, NamedTuple, Optional, Sequence, Tuple
from .config import MIN_DISTANCE
from .geometry import Intersection, Point, distance


class Strip(NamedTuple):
    """One vertical column of the 3D view, produced by ray number index."""

    index: int
    x: float
    top: float
    width: float
    height: float
    shade: float


def shade_color(strip: Strip) -> Tuple[int, int, int]:
    """Grayscale RGB color of a strip."""
    level = int(strip.shade)
    return (level, level, level)


def project(
    intersections: Sequence[Optional[Intersection]],
    position: Point,
    screen_width: float,
    screen_height: float,
    ray_count: int,
    zoom: float,
) -> List[Strip]:
    """
    Map ray hits to strips. intersections[i] belongs to ray i; rays without
    a hit produce no strip, leaving the background visible in that column.
    Heights are capped at the screen height and shades at 255.
    """
    if ray_count <= 0:
        return []
    strip_width = screen_width / ray_count
    strips = []
    for i, hit in enumerate(intersections):
        if hit is None:
            continue
        dist = max(distance(position, (hit.x, hit.y)), MIN_DISTANCE)
        dist_coef = zoom / dist
        height = min(screen_height * dist_coef, screen_height)
        top = (screen_height - height) / 2
        shade = min(max(255 * dist_coef, 0.0), 255.0)
        strips.append(Strip(i, i * strip_width, top, strip_width, height, shade))
    return strips
