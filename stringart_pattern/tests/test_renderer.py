# stringart_pattern/tests/test_renderer.py

import numpy as np
import pytest
from PIL import Image

from stringart_pattern.geometry import Point
from stringart_pattern.pattern import compute_pattern
from stringart_pattern.pixels import PixelBuffer
from stringart_pattern.renderer import draw_circle, draw_segments, render_overlay, render_pattern


def test_render_pattern_outputs_correct_image():
    """Render a small pattern on a blank white surface."""
    pattern = compute_pattern(radius=80, n_bindings=24, fan=12, skip=5)
    size = (200, 200)

    img = render_pattern(pattern, size=size)

    assert isinstance(img, Image.Image)
    assert img.mode == "RGBA"
    assert img.size == size

    data = np.array(img)[..., :3]
    # Expect at least one thread pixel
    assert (data == 0).all(axis=2).any()
    # And average remains mostly white
    assert data.mean() > 200


def test_render_pattern_stroke_method():
    pattern = compute_pattern(radius=80, n_bindings=24, fan=12, skip=5)

    raster = np.array(render_pattern(pattern, size=(200, 200), binding_colour=None))
    stroke = np.array(render_pattern(pattern, size=(200, 200), binding_colour=None,
                                     method="stroke", line_width=3))

    assert (stroke[..., :3] < 255).sum() > (raster[..., :3] < 255).sum()


def test_render_pattern_unknown_method():
    pattern = compute_pattern(radius=80, n_bindings=24, fan=12, skip=5)
    with pytest.raises(ValueError) as excinfo:
        render_pattern(pattern, size=(200, 200), method="airbrush")
    assert "Valid options: raster, stroke" in str(excinfo.value)


def test_render_overlay_keeps_backdrop():
    pattern = compute_pattern(radius=40, n_bindings=16, fan=8, skip=3)
    backdrop = Image.new("L", (100, 100), color=128)

    img = render_overlay(pattern, backdrop)

    assert img.size == (100, 100)
    assert img.mode == "RGBA"
    data = np.array(img).astype(int)
    grey = (data == (128, 128, 128, 255)).all(axis=2)
    # half-opacity red over grey lands halfway between the two
    thread = (data[..., 0] > 180) & (data[..., 1] < 80) & (data[..., 1] == data[..., 2])
    assert thread.any()
    assert (data[..., 3] == 255).all()
    assert not (data == (255, 0, 0, 255)).all(axis=2).any()
    assert 185 <= data[thread][:, 0].min() and data[thread][:, 0].max() <= 195
    assert 60 <= data[thread][:, 1].min() and data[thread][:, 1].max() <= 68
    assert grey.sum() > thread.sum()


@pytest.mark.parametrize("method", ["raster", "stroke"])
def test_render_overlay_opaque_threads(method):
    pattern = compute_pattern(radius=40, n_bindings=16, fan=8, skip=3)
    backdrop = Image.new("RGB", (100, 100), color=(0, 0, 255))

    data = np.array(render_overlay(pattern, backdrop, line_colour=(0, 255, 0),
                                   line_alpha=255, method=method))
    assert (data == (0, 255, 0, 255)).all(axis=2).any()
    assert (data == (0, 0, 255, 255)).all(axis=2).any()


def test_draw_segments_raster_matches_bresenham():
    buf = PixelBuffer(20, 20)
    draw_segments(buf, [(Point(0, 0), Point(4, 4))], (1, 2, 3))
    assert buf.plotted() == {(i, i) for i in range(5)}


def test_draw_segments_stroke_uses_centred_frame():
    buf = PixelBuffer(20, 20)
    draw_segments(buf, [(Point(-3, 2), Point(3, 2))], (9, 9, 9), method="stroke")
    plotted = buf.plotted()
    assert (0, 2) in plotted
    assert all(y == 2 for _, y in plotted)


def test_draw_circle_methods():
    raster = PixelBuffer(30, 30)
    draw_circle(raster, (0, 0), 6, (5, 5, 5))
    assert (6, 0) in raster.plotted()

    stroke = PixelBuffer(30, 30)
    draw_circle(stroke, (0, 0), 6, (5, 5, 5), method="stroke")
    assert stroke.plotted()
    assert (0, 0) not in stroke.plotted()


def test_render_pattern_collects_run_logs():
    pattern = compute_pattern(radius=40, n_bindings=16, fan=8, skip=3)
    run_logs: dict[str, list[str]] = {}

    render_pattern(pattern, size=(100, 100), run_id="render", run_logs=run_logs)

    messages = run_logs["render"]
    assert messages[0].startswith("render_pattern called")
    assert any(m.startswith("Drawing circle") for m in messages)
    assert messages[-1] == "Completed render_pattern"
