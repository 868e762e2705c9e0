# stringart_pattern/anchors.py

import math
import logging
from typing import Optional

from .geometry import Point, nonzero
from .intersection import line_circle_intersection

# Horizontal run used to build the second point of every fan direction.
FAN_RUN = 10


def point_intersection(
    point_0: tuple[float, float],
    point_1: tuple[float, float],
    radius: float,
    n: int,
    logger: Optional[logging.Logger] = None
) -> list[Point]:
    """
    Build the anchor set from a fan of n + 1 lines pivoting at `point_1`.

    The first line runs through point_0 and point_1; every following one is
    turned by 360/(2n) degrees from its predecessor with the tangent
    addition formula k' = (tan s + k) / (1 - tan s · k). The slope is
    carried from step to step, so rounding compounds along the fan.

    Each line contributes the two points where it crosses the circle;
    lines that miss the circle contribute nothing.
    """
    if logger is None:
        logger = logging.getLogger(__name__)
    logger.debug(
        f"point_intersection called with point_0={point_0}, point_1={point_1}, "
        f"radius={radius}, n={n}"
    )

    if n <= 0:
        logger.error(f"Fan size must be positive, got {n}")
        raise ValueError(f"Fan size must be positive, got {n}")

    px, py = nonzero(point_1[0]), nonzero(point_1[1])
    k = (py - nonzero(point_0[1])) / nonzero(px - nonzero(point_0[0]))

    step = 360 / (2 * n)
    tan_step = math.tan(math.radians(step))

    anchors: list[Point] = []
    for i in range(n + 1):
        crossing = line_circle_intersection((px, py), (px + FAN_RUN, py + FAN_RUN * k), radius)
        if crossing is None:
            logger.debug(f"Fan line {i} (slope {k:.4f}) misses the circle")
        else:
            anchors.extend(crossing)

        if step == 90:
            k = -1 / nonzero(k)
        else:
            k = (tan_step + k) / nonzero(1 - tan_step * k)

    logger.debug(f"Generated {len(anchors)} anchors")
    return anchors
