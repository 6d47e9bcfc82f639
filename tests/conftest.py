"""Pytest configuration for raytracer primitive tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import matplotlib
import pytest
import taichi as ti

# Preview tests must never open a window
matplotlib.use("Agg")


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    The raster encoder quantizes pixels in a Taichi kernel, so the runtime
    must exist before any canvas is serialized.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield
