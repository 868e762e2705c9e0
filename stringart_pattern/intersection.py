# stringart_pattern/intersection.py

import math
from typing import Optional

from .geometry import Point, nonzero


def line_circle_intersection(
    point_0: tuple[float, float],
    point_1: tuple[float, float],
    radius: float
) -> Optional[tuple[Point, Point]]:
    """
    Where the infinite line through point_0 and point_1 crosses the circle
    of `radius` centred on the origin.

    The line is written as A·x + B·y + C = 0 (A = slope, B = -1,
    C = intercept), the foot of the perpendicular from the origin is
    found, and the half-chord is laid off on either side of it.

    :returns: both crossing points (equal for a tangent), or None when the
              line passes outside the circle
    """
    if radius <= 0:
        raise ValueError(f"Circle radius must be positive, got {radius}")

    x0, y0 = nonzero(point_0[0]), nonzero(point_0[1])
    x1, y1 = nonzero(point_1[0]), nonzero(point_1[1])
    if (x0, y0) == (x1, y1):
        raise ValueError(f"A line needs two distinct points, got {point_0} twice")

    if x1 == x0:
        # vertical: x = x0
        a, b, c = 1.0, 0.0, -x0
    else:
        k0 = (y1 - y0) / (x1 - x0)
        b0 = y0 - k0 * x0
        a, b, c = k0, -1.0, b0

    norm = a * a + b * b
    foot_x = -a * c / norm
    foot_y = -b * c / norm

    discriminant = radius * radius - c * c / norm
    if discriminant < 0:
        return None
    m = math.sqrt(discriminant / norm)

    return (
        Point(foot_x + b * m, foot_y - a * m),
        Point(foot_x - b * m, foot_y + a * m),
    )
