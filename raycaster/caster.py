"""
Ray fan generation and nearest-wall search, with a scalar and a numpy backend.
"""

from __future__ import annotations
import math
import logging
import numpy as np
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple
from .config import FOV, RAY_COUNT, SIGHT_DISTANCE
from .geometry import Intersection, Point, Segment, intersect

if TYPE_CHECKING:
    from .player import Pose
    from .world import World

logger = logging.getLogger(__name__)


def ray_angles(pose: Pose, fov: float, ray_count: int) -> List[float]:
    """Angles of the ray fan, from pose.angle - fov/2 in steps of fov/ray_count."""
    if ray_count <= 0:
        return []
    angle_delta = fov / ray_count
    start_angle = pose.angle - fov / 2
    return [start_angle + i * angle_delta for i in range(ray_count)]


def generate_rays(
    pose: Pose, fov: float, ray_count: int, sight_distance: float
) -> List[Segment]:
    """
    Build the ray fan for a pose. Ray 0 has the smallest angle and maps to
    the leftmost screen strip. The sine term is subtracted because screen y
    grows downwards.
    """
    origin = Point(pose.x, pose.y)
    rays = []
    for angle in ray_angles(pose, fov, ray_count):
        end = Point(
            pose.x + sight_distance * math.cos(angle),
            pose.y - sight_distance * math.sin(angle),
        )
        rays.append(Segment(origin, end))
    return rays


def find_intersections(
    rays: Sequence[Segment], walls: Sequence[Segment]
) -> List[Optional[Intersection]]:
    """
    Return the nearest wall hit for every ray, or None where nothing is hit.
    On equal r the wall listed first wins.
    """
    hits: List[Optional[Intersection]] = []
    for ray in rays:
        closest = None
        for wall in walls:
            hit = intersect(wall, ray)
            if hit is not None and (closest is None or hit.r < closest.r):
                closest = hit
        hits.append(closest)
    return hits


class RayCaster:
    """Abstract base class for ray casting backends."""

    def __init__(
        self,
        fov: float = FOV,
        ray_count: int = RAY_COUNT,
        sight_distance: float = SIGHT_DISTANCE,
    ) -> None:
        self.fov = fov
        self.ray_count = ray_count
        self.sight_distance = sight_distance

    def cast(
        self, world: World, pose: Pose
    ) -> Tuple[List[Segment], List[Optional[Intersection]]]:
        """Generate the ray fan for a pose and find each ray's nearest hit."""
        rays = generate_rays(
            pose, self.fov, self.ray_count, self.sight_distance
        )
        return rays, self.find_intersections(rays, world.walls)

    def find_intersections(
        self, rays: Sequence[Segment], walls: Sequence[Segment]
    ) -> List[Optional[Intersection]]:
        raise NotImplementedError(
            "RayCaster.find_intersections must be implemented by subclasses"
        )


class PythonRayCaster(RayCaster):
    """Scalar caster: tests every ray against every wall in plain Python."""

    def find_intersections(
        self, rays: Sequence[Segment], walls: Sequence[Segment]
    ) -> List[Optional[Intersection]]:
        return find_intersections(rays, walls)


class NumpyRayCaster(RayCaster):
    """Vectorised caster: solves all ray/wall pairs at once with broadcasting."""

    def find_intersections(
        self, rays: Sequence[Segment], walls: Sequence[Segment]
    ) -> List[Optional[Intersection]]:
        if not rays:
            return []
        if not walls:
            return [None] * len(rays)
        ray_arr = np.asarray(rays, dtype=np.float64)  # (n_rays, 2, 2)
        wall_arr = np.asarray(walls, dtype=np.float64)  # (n_walls, 2, 2)
        c = ray_arr[:, None, 0, :]
        ray_d = ray_arr[:, None, 1, :] - c
        a = wall_arr[None, :, 0, :]
        wall_d = wall_arr[None, :, 1, :] - a
        ac = c - a  # C - A
        denominator = (
            ray_d[..., 0] * wall_d[..., 1] - wall_d[..., 0] * ray_d[..., 1]
        )
        parallel = denominator == 0
        safe_den = np.where(parallel, 1.0, denominator)
        r = (
            wall_d[..., 0] * ac[..., 1] - ac[..., 0] * wall_d[..., 1]
        ) / safe_den
        s = (
            -ac[..., 0] * ray_d[..., 1] + ray_d[..., 0] * ac[..., 1]
        ) / safe_den
        valid = (
            ~parallel & (r >= 0.0) & (r <= 1.0) & (s >= 0.0) & (s <= 1.0)
        )
        r_masked = np.where(valid, r, np.inf)
        # argmin returns the first minimum, so equal r keeps wall order
        nearest = np.argmin(r_masked, axis=1)
        rows = np.arange(len(rays))
        best_r = r_masked[rows, nearest]
        best_s = s[rows, nearest]
        hit_x = wall_arr[nearest, 0, 0] + best_s * (
            wall_arr[nearest, 1, 0] - wall_arr[nearest, 0, 0]
        )
        hit_y = wall_arr[nearest, 0, 1] + best_s * (
            wall_arr[nearest, 1, 1] - wall_arr[nearest, 0, 1]
        )
        hits: List[Optional[Intersection]] = []
        for i in range(len(rays)):
            if np.isfinite(best_r[i]):
                hits.append(
                    Intersection(
                        float(hit_x[i]), float(hit_y[i]), float(best_r[i])
                    )
                )
            else:
                hits.append(None)
        return hits


_BACKENDS = {
    "python": PythonRayCaster,
    "numpy": NumpyRayCaster,
}


def make_ray_caster(name: str, **kwargs) -> RayCaster:
    """Create the ray caster backend registered under name."""
    try:
        backend = _BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown raycast backend {name!r}; "
            f"expected one of {sorted(_BACKENDS)}"
        )
    logger.debug("Using %s ray caster", backend.__name__)
    return backend(**kwargs)
