"""Serpentine course made of quarter circles joined at alternating centres."""

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

_SQRT2 = math.sqrt(2)


@dataclass
class QuarterPathCreator:
    """Builds a course of alternating quarter circles of one radius."""

    radius: float = 5.0
    init_x: float = 0.0
    init_y: float = 0.0
    init_theta: float = 0.0
    course_length: float = 30.0
    resolution: float = 0.1
    hz: int = 10

    frame_id: ClassVar[str] = "map"

    def __post_init__(self) -> None:
        _check_positive("radius", self.radius)
        _check_tenth_step(self.resolution)

    def _update_center_x(self, center_x: float) -> float:
        if center_x == 0.0:
            return self.radius / _SQRT2
        return center_x + _SQRT2 * self.radius

    @staticmethod
    def _is_plus_sign(center_y: float) -> bool:
        return center_y <= 0

    def _course_y(self, x: float, center_x: float, center_y: float) -> float:
        y = _circle_offset(self.radius, x - center_x)
        if not self._is_plus_sign(center_y):
            y = -y
        return y + center_y

    def create_course(self) -> Path:
        """Generate the course as a path in the ``map`` frame."""
        path = Path(self.frame_id)
        chord = _SQRT2 * self.radius
        half_step = self.resolution / 2
        center_x = 0.0
        center_y = self.radius / _SQRT2

        x = 0.0
        while x < self.course_length:
            x = _round_half_away(x * 10) / 10
            remainder = math.fmod(x, chord)
            if remainder <= half_step or remainder >= chord - half_step:
                center_x = self._update_center_x(center_x)
                center_y = -center_y

            y = self._course_y(x, center_x, center_y)
            px, py = place_point(x, y, self.init_x, self.init_y, self.init_theta)
            path.poses.append(Pose(px, py, self.frame_id))
            x += self.resolution
        return path