"""Plain PPM (P3) raster encoding for canvas pixel buffers.

This module quantizes linear float colors to 8-bit channel levels and lays
them out as ASCII PPM text:

    P3
    <width> <height>
    255
    <r g b r g b ...>    one line per canvas row, top to bottom

Quantization is the single place where unconstrained color values become
displayable integers: each channel is scaled by 255, rounded half up and
clamped to [0, 255]. It runs as a Taichi kernel over NumPy arrays, so Taichi
must be initialized before encoding.

Example:
    >>> import numpy as np
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raytracer.preview.raster import encode_ppm
    >>> pixels = np.zeros((3, 5, 3), dtype=np.float64)
    >>> encode_ppm(pixels).splitlines()[:3]
    ['P3', '5 3', '255']
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

# Highest channel level written to the raster
MAX_COLOR_VALUE = 255

# Magic token for the plain (ASCII) PPM variant
PPM_MAGIC = "P3"

# Line length limit observed by strict PPM readers
PPM_MAX_LINE_LENGTH = 70


@ti.kernel
def _quantize_kernel(
    pixels: ti.types.ndarray(dtype=ti.f64, ndim=3),
    levels: ti.types.ndarray(dtype=ti.i32, ndim=3),
):
    for row, column, channel in ti.ndrange(pixels.shape[0], pixels.shape[1], pixels.shape[2]):
        scaled = ti.floor(pixels[row, column, channel] * MAX_COLOR_VALUE + 0.5)
        levels[row, column, channel] = ti.cast(
            ti.min(ti.max(scaled, 0.0), MAX_COLOR_VALUE), ti.i32
        )


def _check_pixel_shape(pixels: npt.NDArray[np.floating]) -> None:
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Pixel array must have shape (height, width, 3), got {pixels.shape}")


def quantize_pixels(pixels: npt.NDArray[np.floating]) -> npt.NDArray[np.int32]:
    """Convert linear float channels to integer levels in [0, MAX_COLOR_VALUE].

    Each channel becomes clamp(floor(value * 255 + 0.5), 0, 255). Values below
    0.0 map to 0 and values above 1.0 map to 255. NaN maps to 0.

    Scaled values are rounded to the nearest level, halves going up, so 0.5
    becomes 128 and 0.999 becomes 255. Plain truncation, floor(value * 255),
    which would give 127 and 254, is not used.

    Args:
        pixels: Float array of shape (height, width, 3).

    Returns:
        Int32 array of the same shape.

    Raises:
        ValueError: If the array does not have shape (height, width, 3).
    """
    _check_pixel_shape(pixels)

    levels = np.zeros(pixels.shape, dtype=np.int32)
    if pixels.size == 0:
        return levels

    # Pin non-finite values before they reach the kernel
    finite = np.nan_to_num(
        pixels.astype(np.float64),
        nan=0.0,
        posinf=float(MAX_COLOR_VALUE),
        neginf=0.0,
    )
    _quantize_kernel(np.ascontiguousarray(finite), levels)
    return levels


def _wrap_tokens(tokens: list[str], max_line_length: int) -> list[str]:
    """Greedily pack space-separated tokens into lines of bounded length."""
    if not tokens:
        return [""]

    lines = []
    current = tokens[0]
    for token in tokens[1:]:
        if len(current) + 1 + len(token) > max_line_length:
            lines.append(current)
            current = token
        else:
            current = f"{current} {token}"
    lines.append(current)
    return lines


def encode_ppm(
    pixels: npt.NDArray[np.floating],
    max_line_length: int | None = None,
) -> str:
    """Encode a pixel buffer as plain PPM text.

    Rows are written top to bottom, columns left to right, each pixel as
    "r g b". Every line ends with a newline, including the last one.

    Args:
        pixels: Float array of shape (height, width, 3) with linear colors.
        max_line_length: If given, each row is broken on spaces so no data
            line exceeds this many characters. A row never shares a line
            with the next row. Use PPM_MAX_LINE_LENGTH for strict readers.

    Returns:
        The PPM document as a string.

    Raises:
        ValueError: If the array shape is wrong or max_line_length is too
            short to hold a single channel value.
    """
    _check_pixel_shape(pixels)
    if max_line_length is not None and max_line_length < len(str(MAX_COLOR_VALUE)):
        raise ValueError(
            f"max_line_length must be at least {len(str(MAX_COLOR_VALUE))}, "
            f"got {max_line_length}"
        )

    height, width = pixels.shape[:2]
    levels = quantize_pixels(pixels)

    lines = [PPM_MAGIC, f"{width} {height}", str(MAX_COLOR_VALUE)]
    for row in levels:
        tokens = [str(level) for level in row.ravel()]
        if max_line_length is None:
            lines.append(" ".join(tokens))
        else:
            lines.extend(_wrap_tokens(tokens, max_line_length))

    return "\n".join(lines) + "\n"
