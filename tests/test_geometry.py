import math

import pytest

from coursegen.geometry import Path, Pose, place_point


def test_place_point_without_rotation_is_translation():
    assert place_point(3.0, -2.0, 1.5, 4.0, 0.0) == pytest.approx((4.5, 2.0))


def test_place_point_origin_stays_at_start():
    assert place_point(0.0, 0.0, 2.0, -1.0, 1.2) == pytest.approx((2.0, -1.0))


def test_place_point_quarter_turn():
    x, y = place_point(1.0, 0.0, 0.0, 0.0, math.pi / 2)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


@pytest.mark.parametrize("theta", [0.0, 0.3, 1.0, -2.5, math.pi])
def test_place_point_preserves_distance_from_start(theta):
    x, y = place_point(3.0, 4.0, 10.0, 20.0, theta)
    assert math.hypot(x - 10.0, y - 20.0) == pytest.approx(5.0)


def test_path_points_len_and_iter():
    poses = [Pose(0.0, 0.0, "odom"), Pose(1.0, 2.0, "odom"), Pose(3.0, -1.0, "odom")]
    path = Path("odom", list(poses))
    assert len(path) == 3
    assert list(path) == poses
    assert path.points() == [(0.0, 0.0), (1.0, 2.0), (3.0, -1.0)]


def test_empty_path():
    path = Path("map")
    assert len(path) == 0
    assert path.points() == []
    assert list(path) == []