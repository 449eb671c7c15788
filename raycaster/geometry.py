"""
Plane geometry primitives: points, segments, and segment/segment intersection.
"""

from __future__ import annotations
import math
from typing import NamedTuple, Optional


class Point(NamedTuple):
    x: float
    y: float


class Segment(NamedTuple):
    """Ordered pair of points; used for both walls and rays."""

    a: Point
    b: Point

    @classmethod
    def from_coords(
        cls, x1: float, y1: float, x2: float, y2: float
    ) -> Segment:
        return cls(Point(float(x1), float(y1)), Point(float(x2), float(y2)))

    def is_degenerate(self) -> bool:
        return self.a == self.b


class Intersection(NamedTuple):
    """
    Hit point of a ray on a wall.
    r is the parametric position along the ray (0 at the origin, 1 at the
    far end) and is only meaningful for comparing hits on the same ray.
    """

    x: float
    y: float
    r: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def intersect(wall: Segment, ray: Segment) -> Optional[Intersection]:
    """
    Intersect a wall AB with a ray CD.

    Returns None when the segments are parallel or collinear (zero
    denominator) or when the crossing point of the two lines lies outside
    either segment. Both parameters are accepted on the closed range [0, 1].
    """
    (ax, ay), (bx, by) = wall
    (cx, cy), (dx, dy) = ray
    wall_dx = bx - ax
    wall_dy = by - ay
    ray_dx = dx - cx
    ray_dy = dy - cy
    denominator = ray_dx * wall_dy - wall_dx * ray_dy
    if denominator == 0:
        return None
    # r runs along the ray, s along the wall
    r = (wall_dx * (cy - ay) - (cx - ax) * wall_dy) / denominator
    s = ((ax - cx) * ray_dy - ray_dx * (ay - cy)) / denominator
    if 0.0 <= r <= 1.0 and 0.0 <= s <= 1.0:
        return Intersection(ax + s * wall_dx, ay + s * wall_dy, r)
    return None
