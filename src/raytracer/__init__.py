"""Geometric and pixel-data primitives for the software raytracer.

This package provides the numerical substrate every rendering stage builds on:
- Homogeneous-coordinate tuple algebra (points and vectors)
- Linear RGB color algebra
- A pixel canvas that serializes to plain PPM raster text

Subpackages:
    core: Float tolerance, tuples, colors and the canvas
    preview: Raster encoding, image export and Matplotlib preview
    simulation: Projectile physics built on the tuple algebra
"""

__version__ = "0.1.0"
