# stringart_pattern/bindings.py

import math
import logging
from typing import Optional

from .geometry import Point


def create_bindings(
    center: tuple[float, float],
    radius: float,
    n: int,
    logger: Optional[logging.Logger] = None
) -> list[Point]:
    """
    Place `n` bindings (nails) evenly around the perimeter of a circle.

    The angle is accumulated in steps of 360/n and every coordinate is
    floored to a whole pixel. Bindings come back in generation order,
    i.e. by increasing angle starting from 0°.
    """
    if logger is None:
        logger = logging.getLogger(__name__)
    logger.debug(f"create_bindings called with center={center}, radius={radius}, n={n}")

    if n <= 0:
        logger.error(f"Binding count must be positive, got {n}")
        raise ValueError(f"Binding count must be positive, got {n}")
    if radius <= 0:
        logger.error(f"Circle radius must be positive, got {radius}")
        raise ValueError(f"Circle radius must be positive, got {radius}")

    x0, y0 = center
    offset = 360 / n
    bindings: list[Point] = []

    angle = 0.0
    while angle < 360:
        x = x0 + radius * math.cos(math.radians(angle))
        y = y0 + radius * math.sin(math.radians(angle))
        bindings.append(Point(math.floor(x), math.floor(y)))
        angle += offset

    logger.debug(f"Generated {len(bindings)} bindings")
    return bindings
