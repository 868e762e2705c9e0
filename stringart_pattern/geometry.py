# stringart_pattern/geometry.py

import math
from typing import NamedTuple

# Stand-in for exact zeros in slope and angle arithmetic.
EPSILON = 1e-9


class Point(NamedTuple):
    """
    A coordinate pair in the frame centred on the circle's origin
    (y grows upwards, unlike the pixel buffer).
    """
    x: float
    y: float


def nonzero(value: float) -> float:
    """Replace an exact zero by EPSILON, pass anything else through."""
    return EPSILON if value == 0 else value


def get_angle(point: tuple[float, float]) -> float:
    """
    Angle of `point` around the origin, in degrees within [0, 360).

    Zero coordinates are swapped for EPSILON first, so points lying exactly
    on an axis fall into the neighbouring quadrant on the positive side.
    """
    x = nonzero(point[0])
    y = nonzero(point[1])
    theta = math.degrees(math.atan(abs(y / x)))

    if x > 0 and y > 0:
        angle = theta
    elif x < 0 and y > 0:
        angle = 180 - theta
    elif x < 0 and y < 0:
        angle = 180 + theta
    else:
        angle = 360 - theta

    # 360 - (tiny theta) can round back up to exactly 360
    return angle if angle < 360 else 0.0


def get_point(angle: float, radius: float) -> Point:
    """Cartesian point at `angle` degrees on a circle of `radius` around the origin."""
    rad = math.radians(angle)
    return Point(radius * math.cos(rad), radius * math.sin(rad))
