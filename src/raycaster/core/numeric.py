"""Scalar helpers shared by the math value types.

Every float-bearing type in the package (tuples, colours, matrices) compares
with ``approx_equal`` instead of ``==`` so that drift from chained
transforms does not break equality.

Example:
    >>> from src.raycaster.core.numeric import approx_equal, radians
    >>> approx_equal(0.1 + 0.2, 0.3)
    True
    >>> round(radians(180.0), 5)
    3.14159
"""

import math

# Absolute tolerance for float comparisons
EPSILON = 1e-5


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Check whether two floats are equal within an absolute tolerance.

    Args:
        a: First value.
        b: Second value.
        epsilon: Absolute tolerance (default EPSILON).

    Returns:
        True if ``|a - b| < epsilon``.
    """
    return abs(a - b) < epsilon


def radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees / 180.0 * math.pi


def degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians / math.pi * 180.0
