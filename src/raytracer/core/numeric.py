"""Floating-point tolerance and IEEE-754 helpers.

Every value type in the core compares its components through ``float_eq`` so
that one tolerance applies throughout the system.

Example:
    >>> from src.raytracer.core.numeric import float_eq
    >>> float_eq(0.1 + 0.2, 0.3)
    True
"""

import numpy as np

# Absolute tolerance for float equality
EPSILON = 1e-6


def float_eq(a: float, b: float) -> bool:
    """Check whether two floats are equal within EPSILON.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if abs(a - b) < EPSILON. NaN never compares equal.
    """
    return abs(a - b) < EPSILON


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide two floats with IEEE-754 semantics.

    Python raises ZeroDivisionError for a zero float divisor. This helper
    instead returns +/-inf for a non-zero numerator and nan for 0/0.

    Args:
        numerator: The dividend.
        denominator: The divisor.

    Returns:
        The quotient as a plain float.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
