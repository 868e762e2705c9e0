# stringart_pattern/renderer.py

import logging
from typing import Any, Callable, Optional, Sequence

from PIL import Image, ImageDraw

from .geometry import Point
from .log_capture import resolve_logger
from .pattern import DEFAULT_SIZE
from .pixels import PixelBuffer, normalize_color
from .rasterizer import bresenhams_circle, bresenhams_line

Segment = tuple[Point, Point]


def _surface_xy(buffer: PixelBuffer, point: tuple[float, float]) -> tuple[float, float]:
    # same mapping as to_buffer_coords, without flooring, for Pillow strokes
    return buffer.width / 2 + point[0], buffer.height / 2 - point[1] - 1


def _stroke(buffer: PixelBuffer, paint: Callable[[ImageDraw.ImageDraw], None]) -> None:
    img = buffer.flush()
    paint(ImageDraw.Draw(img))
    buffer.load(img)


def _raster_segments(buffer, segments, color, line_width):
    for p0, p1 in segments:
        bresenhams_line(buffer, p0, p1, color)


def _stroke_segments(buffer, segments, color, line_width):
    def paint(draw):
        for p0, p1 in segments:
            draw.line([_surface_xy(buffer, p0), _surface_xy(buffer, p1)], fill=color, width=line_width)
    _stroke(buffer, paint)


def _raster_circle(buffer, center, radius, color, line_width):
    bresenhams_circle(buffer, center, int(radius), color)


def _stroke_circle(buffer, center, radius, color, line_width):
    cx, cy = _surface_xy(buffer, center)
    _stroke(buffer, lambda draw: draw.ellipse(
        [cx - radius, cy - radius, cx + radius, cy + radius],
        outline=color,
        width=line_width,
    ))


# drawing method -> (segment drawer, circle drawer)
DRAWERS: dict[str, tuple[Callable, Callable]] = {
    "raster": (_raster_segments, _raster_circle),
    "stroke": (_stroke_segments, _stroke_circle),
}


def _get_drawers(method: str, logger: logging.Logger) -> tuple[Callable, Callable]:
    drawers = DRAWERS.get(method)
    if drawers is None:
        valid = ", ".join(DRAWERS.keys())
        logger.error(f"Unknown drawing method '{method}'. Valid options: {valid}")
        raise ValueError(f"Unknown drawing method '{method}'. Valid options: {valid}")
    return drawers


def draw_segments(
    buffer: PixelBuffer,
    segments: Sequence[Segment],
    color: Sequence[int],
    line_width: int = 1,
    method: str = "raster",
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Draw every (start, end) segment onto `buffer`.

    "raster" plots through Bresenham and ignores `line_width`; "stroke"
    hands the segments to Pillow's line drawing.
    """
    if logger is None:
        logger = logging.getLogger(__name__)
    segment_drawer, _ = _get_drawers(method, logger)
    logger.debug(f"Drawing {len(segments)} segments with method={method}, line_width={line_width}")
    segment_drawer(buffer, segments, normalize_color(color), line_width)


def draw_circle(
    buffer: PixelBuffer,
    center: tuple[float, float],
    radius: float,
    color: Sequence[int],
    line_width: int = 1,
    method: str = "raster",
    logger: Optional[logging.Logger] = None
) -> None:
    if logger is None:
        logger = logging.getLogger(__name__)
    _, circle_drawer = _get_drawers(method, logger)
    logger.debug(f"Drawing circle center={center}, radius={radius} with method={method}")
    circle_drawer(buffer, center, radius, normalize_color(color), line_width)


def _draw_pattern(
    buffer: PixelBuffer,
    pattern: dict[str, Any],
    radius: float,
    center: tuple[float, float],
    line_colour: Sequence[int],
    frame_colour: Optional[Sequence[int]],
    binding_colour: Optional[Sequence[int]],
    line_width: int,
    method: str,
    logger: logging.Logger
) -> None:
    if frame_colour is not None:
        draw_circle(buffer, center, radius, frame_colour, line_width, method, logger=logger)

    segments = pattern["segments"]
    for idx in range(0, len(segments), 50):
        draw_segments(buffer, segments[idx:idx + 50], line_colour, line_width, method, logger=logger)
        logger.debug(f"Drew {min(idx + 50, len(segments))}/{len(segments)} threads")

    if binding_colour is not None:
        for b in pattern["bindings"]:
            buffer.put_pixel(b[0], b[1], binding_colour)


def render_pattern(
    pattern: dict[str, Any],
    size: tuple[int, int] = DEFAULT_SIZE,
    radius: Optional[float] = None,
    center: tuple[float, float] = (0, 0),
    background: Sequence[int] = (255, 255, 255, 255),
    line_colour: Sequence[int] = (0, 0, 0),
    frame_colour: Optional[Sequence[int]] = (200, 200, 200),
    binding_colour: Optional[Sequence[int]] = (255, 0, 0),
    line_width: int = 1,
    method: str = "raster",
    logger: Optional[logging.Logger] = None,
    *,
    run_id: Optional[str] = None,
    run_logs: Optional[dict[str, list[str]]] = None
) -> Image.Image:
    """
    Render a computed pattern (see `pattern.compute_pattern`) on a blank
    surface: frame circle, threads, then the bindings on top.

    `radius` defaults to the distance of the first reconciled point, or of
    the first binding when nothing was matched. Passing `run_logs` collects
    this call's log lines under `run_id`.
    """
    logger = resolve_logger(logger, run_id, run_logs, __name__)
    logger.debug(
        f"render_pattern called with {len(pattern['segments'])} threads, "
        f"size={size}, line_width={line_width}, method={method}"
    )

    buffer = PixelBuffer(*size)
    buffer.data[...] = normalize_color(background)
    if radius is None:
        radius = _pattern_radius(pattern, center)

    _draw_pattern(buffer, pattern, radius, center, line_colour, frame_colour,
                  binding_colour, line_width, method, logger)

    logger.debug("Completed render_pattern")
    return buffer.flush()


def render_overlay(
    pattern: dict[str, Any],
    base_image: Image.Image,
    radius: Optional[float] = None,
    center: tuple[float, float] = (0, 0),
    line_colour: tuple[int, int, int] = (255, 0, 0),
    line_alpha: int = 128,
    line_width: int = 1,
    method: str = "raster",
    logger: Optional[logging.Logger] = None
) -> Image.Image:
    """
    Draws the pattern's threads over `base_image` (any Pillow image, e.g.
    from `preprocessing.load_backdrop`), using a translucent line colour so
    the backdrop stays visible. Keeps the image's size.
    """
    if logger is None:
        logger = logging.getLogger(__name__)
    logger.debug(
        f"render_overlay called with {len(pattern['segments'])} threads, "
        f"image size={base_image.size}, line_colour={line_colour}, line_alpha={line_alpha}"
    )

    # threads go onto a transparent layer that is composited afterwards
    layer = PixelBuffer(*base_image.size)
    if radius is None:
        radius = _pattern_radius(pattern, center)

    _draw_pattern(layer, pattern, radius, center, tuple(line_colour[:3]) + (line_alpha,),
                  None, None, line_width, method, logger)

    overlay = Image.alpha_composite(base_image.convert('RGBA'), layer.flush())
    logger.debug("Completed render_overlay")
    return overlay


def _pattern_radius(pattern: dict[str, Any], center: tuple[float, float]) -> float:
    ref = (pattern.get("points") or pattern.get("bindings") or [None])[0]
    if ref is None:
        return 0.0
    return ((ref[0] - center[0]) ** 2 + (ref[1] - center[1]) ** 2) ** 0.5
