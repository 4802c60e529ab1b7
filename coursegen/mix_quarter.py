"""Course of quarter-circle arcs whose radii change from one arc to the next."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from .geometry import (
    Path,
    Pose,
    _check_positive,
    _circle_offset,
    _round_half_away,
    place_point,
)

logger = logging.getLogger(__name__)


@dataclass
class MixQuarterPathCreator:
    """Builds a course of arcs, one per entry of ``all_radius``.

    Entries smaller than half a step keep the previous radius and centre.
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
        _check_positive("first radius", self.all_radius[0])
        _check_positive("resolution", self.resolution)

    @property
    def semicircle_number(self) -> int:
        """Number of arcs the course is made of."""
        return len(self.all_radius)

    @staticmethod
    def _update_center_x(center_x: float, previous: float, radius: float) -> float:
        if center_x == 0.0:
            return radius / 2
        return center_x + previous / 2 + radius / 2

    @staticmethod
    def _is_plus_sign(center_y: float) -> bool:
        return center_y <= 0

    def _course_y(self, radius: float, x: float, center_x: float, center_y: float) -> float:
        y = _circle_offset(radius, x - center_x)
        if not self._is_plus_sign(center_y):
            y = -y
        return y + center_y

    def create_course(self) -> Path:
        """Generate the course as a path in the ``map`` frame."""
        path = Path(self.frame_id)
        radii = self.all_radius
        step = self.resolution
        half_step = step / 2
        radius = radii[0]
        center_x = radii[0] / 2
        center_y = radii[0] / 2
        counter = 0
        update_check = 0.0

        x = 0.0
        while x < self.max_course_length:
            x = _round_half_away(x / step) * step

            if radius - half_step <= update_check <= radius + half_step:
                counter += 1
                if counter >= len(radii):
                    self.course_length = x
                    return path
                previous = radius
                if radii[counter] >= half_step:
                    radius = radii[counter]
                    center_x = self._update_center_x(center_x, previous, radius)
                    logger.debug(
                        "arc %d: radius=%f centre_x=%f at x=%f", counter, radius, center_x, x
                    )
                update_check = 0.0

            y = self._course_y(radius, x, center_x, center_y)
            px, py = place_point(x, y, self.init_x, self.init_y, self.init_theta)
            path.poses.append(Pose(px, py, self.frame_id))

            update_check += step
            x += step

        self.course_length = self.max_course_length
        return path