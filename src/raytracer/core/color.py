"""Linear RGB color values.

Colors are plain linear-algebra values with no clamping: channels may be
negative or exceed 1.0 while shading math is in progress. Conversion to
displayable integers happens only when a canvas is serialized.

Example:
    >>> from src.raytracer.core.color import Color
    >>> Color(1.0, 0.2, 0.4) * Color(0.9, 1.0, 0.1) == Color(0.9, 0.2, 0.04)
    True
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from src.raytracer.core.numeric import float_eq


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB color with unconstrained float channels.

    Attributes:
        red: The red channel.
        green: The green channel.
        blue: The blue channel.
    """

    red: float
    green: float
    blue: float

    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", float(self.red))
        object.__setattr__(self, "green", float(self.green))
        object.__setattr__(self, "blue", float(self.blue))

    @classmethod
    def black(cls) -> Color:
        """Create the color (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            float_eq(self.red, other.red)
            and float_eq(self.green, other.green)
            and float_eq(self.blue, other.blue)
        )

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: object) -> Color:
        # Color * Color is the Hadamard product (light filtering), not a dot product
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, numbers.Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Color:
        if isinstance(other, numbers.Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def as_array(self) -> npt.NDArray[np.float64]:
        """Return the channels as a float64 array (red, green, blue)."""
        return np.array([self.red, self.green, self.blue], dtype=np.float64)
