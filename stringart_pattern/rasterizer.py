# stringart_pattern/rasterizer.py

import math
from typing import Optional, Sequence

from .pixels import PixelBuffer


def bresenhams_line(
    buffer: PixelBuffer,
    point_0: tuple[float, float],
    point_1: tuple[float, float],
    color: Sequence[Optional[int]],
) -> list[tuple[int, int]]:
    """
    Rasterize the segment point_0 -> point_1 with integer-error Bresenham.

    The end point is plotted first. Stepping stops as soon as either axis
    reaches its target, so axis-aligned segments only get their end point
    and the tail of a shallow or steep segment is left out.

    :returns: the centred coordinates that were plotted, in plot order
    """
    x0, y0 = math.floor(point_0[0]), math.floor(point_0[1])
    x1, y1 = math.floor(point_1[0]), math.floor(point_1[1])

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    error = dx - dy

    plotted = [(x1, y1)]
    buffer.put_pixel(x1, y1, color)
    while x0 != x1 and y0 != y1:
        plotted.append((x0, y0))
        buffer.put_pixel(x0, y0, color)
        error_2 = error * 2
        if error_2 > -dy:
            error -= dy
            x0 += sx
        if error_2 < dx:
            error += dx
            y0 += sy
    return plotted


def bresenhams_circle(
    buffer: PixelBuffer,
    center: tuple[float, float],
    radius: int,
    color: Sequence[Optional[int]],
) -> list[tuple[int, int]]:
    """
    Rasterize a circle outline with the decision-variable (delta/error)
    recurrence, walking one octant pair from the top down to y < 0 and
    mirroring every step into all eight sign/swap images.
    """
    if radius < 0:
        raise ValueError(f"Circle radius must be non-negative, got {radius}")

    cx, cy = math.floor(center[0]), math.floor(center[1])
    x = 0
    y = int(radius)
    delta = 1 - 2 * y
    plotted: list[tuple[int, int]] = []

    while y >= 0:
        for px, py in (
            (x, y), (x, -y), (-x, y), (-x, -y),
            (y, x), (y, -x), (-y, x), (-y, -x),
        ):
            plotted.append((cx + px, cy + py))
            buffer.put_pixel(cx + px, cy + py, color)

        error = 2 * (delta + y) - 1
        if delta < 0 and error <= 0:
            x += 1
            delta += 2 * x + 1
            continue
        if delta > 0 and error > 0:
            y -= 1
            delta -= 2 * y + 1
            continue
        x += 1
        y -= 1
        delta += 2 * (x - y)

    return plotted
