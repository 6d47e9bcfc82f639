"""Point and Vector value types with homogeneous-coordinate discipline.

Points and vectors share the same three spatial components but differ in
their homogeneous coordinate ``w``: a Vector is a free direction (w = 0) and a
Point is a fixed location (w = 1). The coordinate is a per-type constant, so it
is rebuilt by the result type's constructor on every operation instead of
being carried through the arithmetic.

Only the geometrically meaningful combinations are defined:

    Vector + Vector -> Vector        Point + Vector -> Point
    Vector - Vector -> Vector        Vector + Point -> Point
    -Vector         -> Vector        Point - Vector -> Point
    scalar * Vector -> Vector        Point - Point  -> Vector

Anything else (``Point + Point``, ``Vector - Point``, ``Vector * Vector``)
raises TypeError.

Example:
    >>> from src.raytracer.core.tuples import Point, Vector
    >>> p = Point(3.0, -2.0, 5.0) + Vector(-2.0, 3.0, 1.0)
    >>> p == Point(1.0, 1.0, 6.0)
    True
    >>> Vector(1, 2, 3).cross(Vector(2, 3, 4)) == Vector(-1, 2, -1)
    True
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import numpy.typing as npt

from src.raytracer.core.numeric import float_eq, ieee_divide


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


@dataclass(frozen=True, eq=False)
class _Tuple:
    """Storage and comparison shared by Point and Vector.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float
    y: float
    z: float

    W: ClassVar[float]

    # Keep NumPy scalars from broadcasting over our components
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def origin(cls):
        """Create the value at (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @property
    def w(self) -> float:
        """The homogeneous coordinate, fixed per type."""
        return type(self).W

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            float_eq(self.x, other.x)
            and float_eq(self.y, other.y)
            and float_eq(self.z, other.z)
            and float_eq(self.w, other.w)
        )

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_array(self) -> npt.NDArray[np.float64]:
        """Return the homogeneous 4-component array (x, y, z, w)."""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def _scaled(self, factor: float):
        return type(self)(self.x * factor, self.y * factor, self.z * factor)

    def __mul__(self, other: object):
        if not _is_scalar(other):
            return NotImplemented
        return self._scaled(other)

    def __rmul__(self, other: object):
        if not _is_scalar(other):
            return NotImplemented
        return self._scaled(other)

    def __truediv__(self, other: object):
        if not _is_scalar(other):
            return NotImplemented
        return type(self)(
            ieee_divide(self.x, other),
            ieee_divide(self.y, other),
            ieee_divide(self.z, other),
        )

    def __neg__(self):
        return type(self)(-self.x, -self.y, -self.z)


class Vector(_Tuple):
    """A free direction with magnitude and no position (w = 0)."""

    W: ClassVar[float] = 0.0

    def __add__(self, other: object):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def magnitude(self) -> float:
        """Compute the Euclidean length of the vector.

        Returns:
            sqrt(x^2 + y^2 + z^2), always >= 0.
        """
        # No intermediate underflow or overflow of the squared components
        return math.hypot(self.x, self.y, self.z)

    def normalize(self) -> Vector:
        """Scale the vector to unit length.

        A zero-length vector is not guarded against: 0/0 yields a vector
        whose components are all NaN.

        Returns:
            A vector of magnitude 1 in the same direction.
        """
        length = self.magnitude()
        return Vector(
            ieee_divide(self.x, length),
            ieee_divide(self.y, length),
            ieee_divide(self.z, length),
        )

    def dot(self, other: Vector) -> float:
        """Compute the dot product with another vector.

        Args:
            other: The second vector.

        Returns:
            The sum of the component-wise products.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Compute the right-handed cross product self x other.

        The result is perpendicular to both inputs. The product is not
        commutative: a.cross(b) == -b.cross(a).

        Args:
            other: The second vector.

        Returns:
            The cross product vector.
        """
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


class Point(_Tuple):
    """A fixed location in space (w = 1)."""

    W: ClassVar[float] = 1.0

    def __add__(self, other: object):
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented


# =============================================================================
# Function-style helpers
# =============================================================================


def dot(a: Vector, b: Vector) -> float:
    """Compute the dot product a . b."""
    return a.dot(b)


def cross(a: Vector, b: Vector) -> Vector:
    """Compute the cross product a x b."""
    return a.cross(b)


def magnitude(v: Vector) -> float:
    """Compute the Euclidean length of a vector."""
    return v.magnitude()


def normalize(v: Vector) -> Vector:
    """Normalize a vector to unit length (NaN components for a zero vector)."""
    return v.normalize()
