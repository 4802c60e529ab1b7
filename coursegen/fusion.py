"""Serpentine course made of half circles whose radii change from one to the next."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from .geometry import (
    Path,
    Pose,
    _check_positive,
    _check_tenth_step,
    _circle_offset,
    _round_half_away,
    place_point,
)

logger = logging.getLogger(__name__)


@dataclass
class FusionPathCreator:
    """Builds a course of alternating half circles, one per entry of ``all_radius``.

    After :meth:`create_course` runs, ``course_length`` holds the length of the
    course along the x axis.
    """

    all_radius: Sequence[float]
    init_x: float = 0.0
    init_y: float = 0.0
    init_theta: float = 0.0
    max_course_length: float = 50.0
    resolution: float = 0.1
    hz: int = 10
    course_length: float = field(default=0.0, init=False)

    frame_id: ClassVar[str] = "map"

    def __post_init__(self) -> None:
        self.all_radius = tuple(float(radius) for radius in self.all_radius)
        if not self.all_radius:
            raise ValueError("all_radius must hold at least one radius")
        for radius in self.all_radius:
            _check_positive("radius", radius)
        _check_tenth_step(self.resolution)

    @property
    def semicircle_number(self) -> int:
        """Number of half circles the course is made of."""
        return len(self.all_radius)

    @staticmethod
    def _update_center_x(center_x: float, previous: float, radius: float) -> float:
        if center_x == 0.0:
            return radius
        return center_x + previous + radius

    def create_course(self) -> Path:
        """Generate the course as a path in the ``map`` frame."""
        path = Path(self.frame_id)
        radii = self.all_radius
        half_step = self.resolution / 2
        radius = radii[0]
        center_x = radii[0]
        counter = 0
        update_check = 0.0

        x = 0.0
        while x < self.max_course_length:
            x = _round_half_away(x * 10) / 10

            diameter = 2 * radius
            if diameter - half_step <= update_check <= diameter + half_step:
                counter += 1
                if counter >= len(radii):
                    self.course_length = x
                    return path
                previous, radius = radius, radii[counter]
                center_x = self._update_center_x(center_x, previous, radius)
                logger.debug("half circle %d: radius=%f centre_x=%f", counter, radius, center_x)
                update_check = 0.0

            y = _circle_offset(radius, x - center_x)
            if counter % 2:
                y = -y
            px, py = place_point(x, y, self.init_x, self.init_y, self.init_theta)
            path.poses.append(Pose(px, py, self.frame_id))

            update_check += self.resolution
            x += self.resolution

        self.course_length = self.max_course_length
        return path