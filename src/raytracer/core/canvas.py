"""Fixed-size pixel canvas with PPM serialization.

The canvas stores linear float colors in a NumPy buffer of shape
(height, width, 3), addressed by (column, row) with row 0 at the top. It is
mutable for its whole lifetime: serialization is a pure read, so a canvas can
be encoded any number of times and written to afterwards.

Out-of-bounds reads and writes both raise IndexError. Negative coordinates
are out of bounds; there is no wraparound.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raytracer.core.canvas import Canvas
    >>> from src.raytracer.core.color import Color
    >>> canvas = Canvas(5, 3)
    >>> canvas.write_pixel(0, 0, Color(1.5, 0.0, 0.0))
    >>> canvas.to_raster_text().splitlines()[3].split()[:3]
    ['255', '0', '0']
"""

from __future__ import annotations

import operator
import threading

import numpy as np
import numpy.typing as npt

from src.raytracer.core.color import Color
from src.raytracer.preview.raster import encode_ppm


class Canvas:
    """A width x height grid of colors, initialized to black.

    Each canvas owns a lock guarding its pixel buffer, so it may be shared
    between threads that write pixels while another serializes.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black canvas.

        Args:
            width: Number of columns (>= 0).
            height: Number of rows (>= 0).

        Raises:
            ValueError: If either dimension is negative.
            TypeError: If either dimension is not an integer.
        """
        width = operator.index(width)
        height = operator.index(height)
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")

        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)
        self._lock = threading.Lock()

    @property
    def width(self) -> int:
        """Get the number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Get the number of rows."""
        return self._height

    def _check_bounds(self, column: int, row: int) -> tuple[int, int]:
        column = operator.index(column)
        row = operator.index(row)
        if not (0 <= column < self._width and 0 <= row < self._height):
            raise IndexError(
                f"Pixel ({column}, {row}) is outside the {self._width}x{self._height} canvas"
            )
        return column, row

    def pixel_at(self, column: int, row: int) -> Color:
        """Read the color stored at a pixel.

        Args:
            column: Column index in [0, width).
            row: Row index in [0, height).

        Returns:
            The stored color.

        Raises:
            IndexError: If the coordinate is outside the canvas.
        """
        column, row = self._check_bounds(column, row)
        with self._lock:
            red, green, blue = self._pixels[row, column]
        return Color(red, green, blue)

    def write_pixel(self, column: int, row: int, color: Color) -> None:
        """Overwrite the color stored at a pixel.

        Args:
            column: Column index in [0, width).
            row: Row index in [0, height).
            color: The new color. Out-of-range channels are stored as-is.

        Raises:
            IndexError: If the coordinate is outside the canvas.
            TypeError: If color is not a Color.
        """
        if not isinstance(color, Color):
            raise TypeError(f"Expected a Color, got {type(color).__name__}")
        column, row = self._check_bounds(column, row)
        with self._lock:
            self._pixels[row, column] = (color.red, color.green, color.blue)

    def fill(self, color: Color) -> None:
        """Set every pixel to the same color."""
        if not isinstance(color, Color):
            raise TypeError(f"Expected a Color, got {type(color).__name__}")
        with self._lock:
            self._pixels[:, :] = (color.red, color.green, color.blue)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get a copy of the pixel buffer.

        Returns:
            Float64 array of shape (height, width, 3), row 0 at the top.
        """
        with self._lock:
            return self._pixels.copy()

    def to_raster_text(self, max_line_length: int | None = None) -> str:
        """Serialize the canvas to plain PPM (P3) text.

        Channels are scaled to [0, 255], rounded and clamped. The canvas is
        not modified.

        Args:
            max_line_length: Optional limit on data line length; see
                src.raytracer.preview.raster.encode_ppm.

        Returns:
            The PPM document, terminated by a newline.
        """
        return encode_ppm(self.to_numpy(), max_line_length=max_line_length)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
