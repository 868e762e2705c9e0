# stringart_pattern/tests/test_geometry.py

import math

import pytest

from stringart_pattern.geometry import EPSILON, Point, get_angle, get_point, nonzero


@pytest.mark.parametrize("angle", [10.0, 45.5, 80.0, 100.0, 170.0, 190.0, 260.0, 280.0, 350.0])
def test_get_angle_round_trips_get_point(angle):
    assert get_angle(get_point(angle, 50)) == pytest.approx(angle, abs=1e-9)


def test_get_angle_quadrants():
    assert get_angle((1, 1)) == pytest.approx(45)
    assert get_angle((-1, 1)) == pytest.approx(135)
    assert get_angle((-1, -1)) == pytest.approx(225)
    assert get_angle((1, -1)) == pytest.approx(315)


def test_get_angle_axis_points_use_positive_epsilon():
    """Zeros are replaced by +EPSILON, so axis points land just inside a quadrant."""
    assert get_angle((5, 0)) == pytest.approx(0, abs=1e-6)
    assert 0 < get_angle((5, 0)) < 1
    assert get_angle((-5, 0)) == pytest.approx(180, abs=1e-6)
    assert get_angle((-5, 0)) < 180
    assert get_angle((0, 5)) == pytest.approx(90, abs=1e-6)
    assert get_angle((0, -5)) == pytest.approx(270, abs=1e-6)
    # the origin itself has no direction; both zeros become EPSILON
    assert get_angle((0, 0)) == pytest.approx(45)


def test_get_angle_stays_below_360():
    for y in (-1e-3, -1e-12, -1e-300):
        assert 0 <= get_angle((1, y)) < 360


def test_get_point_on_circle():
    p = get_point(30, 10)
    assert isinstance(p, Point)
    assert p.x == pytest.approx(10 * math.sqrt(3) / 2)
    assert p.y == pytest.approx(5)
    assert math.hypot(*get_point(217, 3.5)) == pytest.approx(3.5)


def test_nonzero():
    assert nonzero(0) == EPSILON
    assert nonzero(0.0) == EPSILON
    assert nonzero(-2.5) == -2.5
