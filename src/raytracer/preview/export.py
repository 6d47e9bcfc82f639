"""Image export utilities for canvases.

This module converts a canvas into 8-bit image data, using the same
quantization as the PPM encoder so every output agrees pixel for pixel.

Example:
    >>> from src.raytracer.core.canvas import Canvas
    >>> from src.raytracer.preview.export import canvas_to_image
    >>>
    >>> canvas = Canvas(64, 48)
    >>> image = canvas_to_image(canvas)
    >>> image.size
    (64, 48)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.raytracer.preview.raster import quantize_pixels

if TYPE_CHECKING:
    from src.raytracer.core.canvas import Canvas


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit image array.

    Args:
        canvas: The canvas to convert.

    Returns:
        Array of shape (height, width, 3) with dtype uint8, row 0 at the top.
    """
    return quantize_pixels(canvas.to_numpy()).astype(np.uint8)


def canvas_to_image(canvas: Canvas) -> PILImage.Image:
    """Convert a canvas to a Pillow RGB image.

    Args:
        canvas: The canvas to convert.

    Returns:
        An in-memory RGB image with the canvas dimensions.
    """
    return PILImage.fromarray(canvas_to_uint8(canvas))
