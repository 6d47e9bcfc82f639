"""Preview module for canvas output and visualization.

This module handles turning a canvas into something a person can look at:

Components:
    raster: Plain PPM (P3) encoding with 8-bit quantization
    export: Conversion to uint8 arrays and Pillow images
    display: Matplotlib-based preview

Quantization (scale by 255, round, clamp to [0, 255]) lives in raster and is
shared by every output path, so a PPM file, an exported image and the preview
window agree pixel for pixel.

Example:
    >>> from src.raytracer.core.canvas import Canvas
    >>> from src.raytracer.preview import canvas_to_image, show_canvas
    >>>
    >>> canvas = Canvas(64, 48)
    >>> canvas_to_image(canvas).save("canvas.png")
    >>> show_canvas(canvas)
"""

from src.raytracer.preview.display import show_canvas
from src.raytracer.preview.export import canvas_to_image, canvas_to_uint8
from src.raytracer.preview.raster import (
    MAX_COLOR_VALUE,
    PPM_MAGIC,
    PPM_MAX_LINE_LENGTH,
    encode_ppm,
    quantize_pixels,
)

__all__ = [
    # Raster encoding
    "MAX_COLOR_VALUE",
    "PPM_MAGIC",
    "PPM_MAX_LINE_LENGTH",
    "encode_ppm",
    "quantize_pixels",
    # Export functions
    "canvas_to_uint8",
    "canvas_to_image",
    # Display functions
    "show_canvas",
]
