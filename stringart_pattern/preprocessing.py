# stringart_pattern/preprocessing.py

from PIL import Image, ImageOps
import logging
from typing import Optional, Tuple, Union, BinaryIO
import os


class ImageLoadError(OSError):
    """The backdrop image could not be opened or decoded."""


def load_backdrop(
    path: Union[str, bytes, os.PathLike, BinaryIO],  # Accept file-like objects
    size: Optional[Tuple[int, int]] = None,
    grayscale: bool = False,
    autocontrast: bool = False,
    logger: Optional[logging.Logger] = None,
) -> Image.Image:
    """
    Load a backdrop image from `path`, optionally convert to grayscale,
    resize and autocontrast it, and return it as a fully decoded RGBA image
    ready for `PixelBuffer.load`.

    :param path: file path or file-like object for PIL to open
    :param size: optional (width, height) to resize the image to
    :param grayscale: whether to drop colour before compositing the threads
    :param autocontrast: whether to apply PIL.ImageOps.autocontrast
    :param logger: optional logger to receive debug messages
    :raises ImageLoadError: when the source is missing, unreadable or corrupt
    """
    if logger is None:
        logger = logging.getLogger(__name__)
    logger.debug("Loading backdrop image")
    try:
        img = Image.open(path)
        img.load()
    except (OSError, ValueError) as exc:
        logger.error(f"Could not load backdrop image: {exc}")
        raise ImageLoadError(f"Could not load backdrop image: {exc}") from exc

    if grayscale:
        logger.debug("Converting to grayscale")
        img = img.convert('L')

    if size:
        logger.debug(f"Resizing image to {size}")
        img = img.resize(size, Image.Resampling.LANCZOS)

    if autocontrast:
        logger.debug("Applying autocontrast")
        img = ImageOps.autocontrast(img.convert('RGB'), cutoff=1)

    result = img.convert('RGBA')
    logger.debug(f"Finished loading backdrop, size={result.size}")
    return result
