"""Serpentine course made of equal half circles along the x axis."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .geometry import (
    Path,
    Pose,
    _check_positive,
    _check_tenth_step,
    _circle_offset,
    _round_half_away,
    place_point,
)


@dataclass
class SimplePathCreator:
    """Builds a course of alternating half circles of one radius."""

    radius: float = 5.0
    init_x: float = 0.0
    init_y: float = 0.0
    init_theta: float = 0.0
    course_length: float = 30.0
    resolution: float = 0.1
    hz: int = 10

    frame_id: ClassVar[str] = "odom"

    def __post_init__(self) -> None:
        _check_positive("radius", self.radius)
        _check_tenth_step(self.resolution)

    def _update_center_x(self, center_x: float) -> float:
        if center_x == 0.0:
            return self.radius
        return center_x + 2 * self.radius

    def _is_plus_sign(self, x: float) -> bool:
        return math.fmod(x, 4 * self.radius) <= 2 * self.radius

    def _course_y(self, x: float, center_x: float) -> float:
        y = _circle_offset(self.radius, x - center_x)
        return y if self._is_plus_sign(x) else -y

    def create_course(self) -> Path:
        """Generate the course as a path in the ``odom`` frame."""
        path = Path(self.frame_id)
        diameter = 2 * self.radius
        half_step = self.resolution / 2
        center_x = 0.0

        x = 0.0
        while x < self.course_length:
            x = _round_half_away(x * 10) / 10
            remainder = math.fmod(x, diameter)
            if remainder <= half_step or remainder >= diameter - half_step:
                center_x = self._update_center_x(center_x)

            y = self._course_y(x, center_x)
            px, py = place_point(x, y, self.init_x, self.init_y, self.init_theta)
            path.poses.append(Pose(px, py, self.frame_id))
            x += self.resolution
        return path