# stringart_pattern/pixels.py

import math
import os
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image

Color = tuple[int, int, int, int]


def normalize_color(color: Sequence[Optional[int]]) -> Color:
    """
    Turn an (R, G, B) or (R, G, B, A) sequence into a full RGBA tuple.
    A missing, None or zero alpha becomes 255.
    """
    if len(color) not in (3, 4):
        raise ValueError(f"Colour must have 3 or 4 channels, got {len(color)}")

    channels = list(color[:3])
    alpha = color[3] if len(color) == 4 else None
    channels.append(alpha or 255)

    for c in channels:
        if c is None or int(c) != c or not 0 <= int(c) <= 255:
            raise ValueError(f"Colour channel is not an integer in [0, 255]: {color!r}")
    return tuple(int(c) for c in channels)  # type: ignore[return-value]


def to_buffer_coords(x: float, y: float, width: int, height: int) -> tuple[int, int]:
    """
    Map a circle-centred coordinate (y up) to a (column, row) pair of a
    top-left-origin buffer. The result may lie outside the buffer.
    """
    col = math.floor(width / 2 + x)
    row = math.floor(height / 2 - y - 1)
    return col, row


def from_buffer_coords(col: int, row: int, width: int, height: int) -> tuple[float, float]:
    """Inverse of `to_buffer_coords` for whole-pixel positions."""
    return col - width / 2, height / 2 - row - 1


class PixelBuffer:
    """
    Flat RGBA surface: a (height, width, 4) uint8 array, row-major with the
    origin at the top-left. All writes go through `put_pixel`, which takes
    circle-centred coordinates and drops anything that falls outside.
    """

    def __init__(self, width: int, height: int):
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"Buffer size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.data = np.zeros((self.height, self.width, 4), dtype=np.uint8)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _index(self, x: float, y: float) -> Optional[tuple[int, int]]:
        col, row = to_buffer_coords(x, y, self.width, self.height)
        if col < 0 or row < 0 or col >= self.width or row >= self.height:
            return None
        return row, col

    def put_pixel(self, x: float, y: float, color: Sequence[Optional[int]]) -> None:
        idx = self._index(x, y)
        if idx is None:
            return
        self.data[idx] = normalize_color(color)

    def get_pixel(self, x: float, y: float) -> Optional[Color]:
        idx = self._index(x, y)
        if idx is None:
            return None
        return tuple(int(c) for c in self.data[idx])  # type: ignore[return-value]

    def sample_pixel(self, x: float, y: float) -> tuple[Color, float]:
        """
        Colour at (x, y) together with its saturation, (R+G+B)/765 rounded
        to two decimals.
        """
        color = self.get_pixel(x, y)
        if color is None:
            raise ValueError(f"Sample point ({x}, {y}) lies outside the {self.width}x{self.height} buffer")
        saturation = round(sum(color[:3]) / 765, 2)
        return color, saturation

    def plotted(self) -> set[tuple[float, float]]:
        """Centred coordinates of every pixel that has been written to."""
        rows, cols = np.nonzero(self.data.any(axis=2))
        return {
            from_buffer_coords(int(c), int(r), self.width, self.height)
            for r, c in zip(rows, cols)
        }

    def clear(self) -> None:
        self.data.fill(0)

    def load(self, image: Image.Image) -> None:
        """Copy `image` into the buffer, resizing it to the surface first."""
        img = image.convert('RGBA')
        if img.size != self.size:
            img = img.resize(self.size, Image.Resampling.LANCZOS)
        self.data[...] = np.array(img, dtype=np.uint8)

    def flush(self) -> Image.Image:
        """Present the buffer as an RGBA Pillow image."""
        return Image.fromarray(self.data.copy(), 'RGBA')

    def save(self, path: Union[str, os.PathLike], format: Optional[str] = None) -> None:
        self.flush().save(path, format=format)
