"""Simulation module for physics driven by the tuple algebra.

Components:
    projectile: Projectile and Environment state with a pure tick update
"""

from .projectile import Environment, Projectile, simulate, tick

__all__ = [
    "Projectile",
    "Environment",
    "tick",
    "simulate",
]
