from __future__ import annotations
import enum
import math
from typing import NamedTuple
from .config import MOVE_SPEED, ROT_SPEED
from .geometry import Point


class Pose(NamedTuple):
    """Position on the map plus facing angle in radians (unbounded)."""

    x: float
    y: float
    angle: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


class Command(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"


def apply_movement(
    pose: Pose, command: Command, move_speed: float, rotate_speed: float
) -> Pose:
    """
    Return the pose after one discrete movement command.

    Forward/backward translate along the facing angle with the screen y axis
    pointing down, matching the direction rays are cast in. Rotation is not
    wrapped. Walls are ignored: the player may pass through them.
    """
    if command is Command.FORWARD or command is Command.BACKWARD:
        sign = 1.0 if command is Command.FORWARD else -1.0
        dx = math.cos(pose.angle) * move_speed * sign
        dy = -math.sin(pose.angle) * move_speed * sign
        return Pose(pose.x + dx, pose.y + dy, pose.angle)
    if command is Command.ROTATE_LEFT:
        return Pose(pose.x, pose.y, pose.angle + rotate_speed)
    if command is Command.ROTATE_RIGHT:
        return Pose(pose.x, pose.y, pose.angle - rotate_speed)
    raise ValueError(f"Unknown movement command: {command!r}")


class Player:
    """Player state and movement."""

    def __init__(
        self,
        x: float = 75.0,
        y: float = 100.0,
        angle: float = 1.5 * math.pi,
        move_speed: float = MOVE_SPEED,
        rot_speed: float = ROT_SPEED,
    ) -> None:
        """
        Initialize the player.
        x, y: starting position in map units.
        angle: facing direction in radians.
        move_speed: distance moved per forward/backward command.
        rot_speed: angle turned per rotate command.
        """
        self.x = x
        self.y = y
        self.angle = angle
        self.move_speed = move_speed
        self.rot_speed = rot_speed

    @classmethod
    def from_pose(cls, pose: Pose, **kwargs) -> Player:
        return cls(x=pose.x, y=pose.y, angle=pose.angle, **kwargs)

    @property
    def pose(self) -> Pose:
        return Pose(self.x, self.y, self.angle)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def handle(self, command: Command) -> None:
        """Apply a movement command to the player in place."""
        self.x, self.y, self.angle = apply_movement(
            self.pose, command, self.move_speed, self.rot_speed
        )
