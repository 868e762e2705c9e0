# stringart_pattern/pattern.py

import logging
from typing import Any, Optional, Sequence

from .anchors import point_intersection
from .bindings import create_bindings
from .geometry import Point
from .log_capture import resolve_logger
from .reconcile import compare_bindings

# === Configuration ===
# Surface the pattern is laid out on, (width, height) in pixels.
DEFAULT_SIZE = (400, 400)
# Frame circle and how many nails sit on it.
DEFAULT_RADIUS = 180
DEFAULT_BINDINGS = 72
# Number of fan steps; the fan turns by 360/(2 * fan) per step.
DEFAULT_FAN = 36
# Index distance between the two ends of every thread.
DEFAULT_SKIP = 17


def intersection(
    points: Sequence[Point],
    skip: int
) -> list[tuple[Point, Point]]:
    """
    Thread every point to the one `skip` places further along, wrapping
    around the end of the list.
    """
    count = len(points)
    return [(points[i], points[(i + skip) % count]) for i in range(count)]


def compute_pattern(
    center: tuple[float, float] = (0, 0),
    radius: float = DEFAULT_RADIUS,
    n_bindings: int = DEFAULT_BINDINGS,
    pivot: tuple[float, float] = (0, 0),
    direction: Optional[tuple[float, float]] = None,
    fan: int = DEFAULT_FAN,
    skip: int = DEFAULT_SKIP,
    logger: Optional[logging.Logger] = None,
    *,
    run_id: Optional[str] = None,
    run_logs: Optional[dict[str, list[str]]] = None
) -> dict[str, Any]:
    """
    Run the whole pattern computation in one pass:
    bindings -> anchors -> reconciliation -> threads.

    :param center: centre of the frame circle
    :param radius: radius of the frame circle
    :param n_bindings: how many nails around the circle
    :param pivot: common point of every fan line
    :param direction: second point of the first fan line; defaults to the
                      rightmost point of the circle
    :param fan: number of fan steps
    :param skip: index distance between thread ends
    :param logger: optional Logger to receive debug messages
    :param run_id: key under which `run_logs` collects this run's messages
    :param run_logs: optional dict to collect every stage's log lines into,
                     used when no `logger` is given
    :returns: dict with "bindings", "anchors", "points" and "segments"
    """
    logger = resolve_logger(logger, run_id, run_logs, __name__)
    if direction is None:
        direction = (radius, 0)
    logger.debug(
        f"compute_pattern called with center={center}, radius={radius}, "
        f"n_bindings={n_bindings}, pivot={pivot}, direction={direction}, "
        f"fan={fan}, skip={skip}"
    )

    bindings = create_bindings(center, radius, n_bindings, logger=logger)
    anchors = point_intersection(direction, pivot, radius, fan, logger=logger)
    points = compare_bindings(bindings, anchors, radius, logger=logger)
    segments = intersection(points, skip)

    logger.debug(f"Completed compute_pattern with {len(segments)} threads")
    return {
        "bindings": bindings,
        "anchors": anchors,
        "points": points,
        "segments": segments,
    }
