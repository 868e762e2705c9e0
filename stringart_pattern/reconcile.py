# stringart_pattern/reconcile.py

import logging
from typing import Iterable, Optional, Sequence

from .geometry import Point, get_angle, get_point


def sort_angles(angles: Iterable[float]) -> list[float]:
    """Ascending order; equal angles keep their input order."""
    return sorted(angles)


def compare_bindings(
    bindings: Sequence[tuple[float, float]],
    anchors: Sequence[tuple[float, float]],
    radius: float,
    logger: Optional[logging.Logger] = None
) -> list[Point]:
    """
    Snap every ideal anchor angle onto the real binding angles near it.

    Binding 0 is represented by a 360° sentinel rather than by its own
    angle, and the last anchor pair (the final fan line) is left out. An
    anchor matches every binding closer than half a binding spacing; an
    anchor whose angle is exactly equal to the previous sorted one is
    skipped.

    :returns: the matched positions on the circle of `radius`, in sorted
              anchor order, bindings in scan order within each anchor
    """
    if logger is None:
        logger = logging.getLogger(__name__)
    logger.debug(
        f"compare_bindings called with {len(bindings)} bindings, "
        f"{len(anchors)} anchors, radius={radius}"
    )

    if not bindings:
        logger.error("Cannot reconcile against an empty binding set")
        raise ValueError("Cannot reconcile against an empty binding set")

    binding_angles = [get_angle(b) for b in bindings[1:]]
    binding_angles.append(360.0)

    anchor_angles = sort_angles(get_angle(a) for a in anchors[:-2])
    correction = 360 / (2 * len(bindings))

    matched: list[float] = []
    previous = None
    for angle in anchor_angles:
        if angle == previous:
            continue
        previous = angle
        for candidate in binding_angles:
            if abs(candidate - angle) < correction:
                matched.append(candidate)

    logger.debug(
        f"Matched {len(matched)} points from {len(anchor_angles)} anchor angles "
        f"(tolerance={correction:.3f}°)"
    )
    return [get_point(angle, radius) for angle in matched]
