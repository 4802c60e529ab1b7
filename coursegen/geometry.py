"""Poses, paths and the placement of course points in the world frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Pose:
    """A planar position tagged with the frame it is expressed in."""

    x: float
    y: float
    frame_id: str = "map"


@dataclass
class Path:
    """An ordered sequence of poses sharing one frame."""

    frame_id: str
    poses: list[Pose] = field(default_factory=list)

    def points(self) -> list[tuple[float, float]]:
        """Return the (x, y) coordinates of every pose in order."""
        return [(pose.x, pose.y) for pose in self.poses]

    def __len__(self) -> int:
        return len(self.poses)

    def __iter__(self) -> Iterator[Pose]:
        return iter(self.poses)


def place_point(
    x: float, y: float, init_x: float, init_y: float, init_theta: float
) -> tuple[float, float]:
    """Rotate a course point by ``init_theta`` and shift it to the start position."""
    r = math.hypot(x, y)
    theta = math.atan2(y, x)
    return (
        init_x + r * math.cos(theta + init_theta),
        init_y + r * math.sin(theta + init_theta),
    )


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _circle_offset(radius: float, dx: float) -> float:
    """Height of a circle of ``radius`` at horizontal distance ``dx`` from its centre.

    Points outside the circle give NaN.
    """
    square = radius * radius - dx * dx
    return math.sqrt(square) if square >= 0.0 else math.nan


def _check_positive(name: str, value: float) -> None:
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {value!r}")


def _check_tenth_step(resolution: float) -> None:
    """Reject steps that vanish once x is snapped to a 0.1 m grid."""
    _check_positive("resolution", resolution)
    if _round_half_away(resolution * 10) < 1:
        raise ValueError(
            f"resolution {resolution!r} is lost when snapped to 0.1 m steps"
        )