"""Core primitives module.

This module contains the value types every rendering stage builds on:

Components:
    numeric: Float tolerance (EPSILON, float_eq) and IEEE-754 division
    tuples: Point and Vector with homogeneous-coordinate discipline
    color: Linear RGB color algebra
    canvas: Pixel grid with PPM serialization

All equality in the core goes through float_eq, so one tolerance applies to
points, vectors and colors alike.
"""

from .canvas import Canvas
from .color import Color
from .numeric import EPSILON, float_eq, ieee_divide
from .tuples import Point, Vector, cross, dot, magnitude, normalize

__all__ = [
    "EPSILON",
    "float_eq",
    "ieee_divide",
    "Point",
    "Vector",
    "dot",
    "cross",
    "magnitude",
    "normalize",
    "Color",
    "Canvas",
]
