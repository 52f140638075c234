"""Module for floating point comparisons used by the geodesic solvers"""

__all__ = [
    'is_approximately_equal', 'is_negative', 'is_positive', 'is_zero'
]

import math

import numpy as np

from geocurves._const import PRECISION


def is_approximately_equal(a: float, b: float, tolerance: float = PRECISION) -> bool:
    """
    Test whether two floats are equal within a relative tolerance.

    Non-finite values are only ever equal to themselves; two NaNs are considered
    equal to one another.

    Args:
        a:
            The first number

        b:
            The second number

        tolerance: (Default 1e-12)
            The relative tolerance, scaled by the larger magnitude of the two
            operands (or by 1.0 when either operand is exactly zero)

    Returns:
        bool
    """
    if a == b:
        return True

    if not (math.isfinite(a) and math.isfinite(b)):
        return math.isnan(a) and math.isnan(b)

    scale = 1.0
    if not (a == 0.0 or b == 0.0):
        scale = max(abs(a), abs(b))

    return abs(a - b) <= scale * tolerance


def is_zero(val: float) -> bool:
    """True if the sign of the value is exactly zero (includes -0.0, excludes NaN)"""
    return bool(np.sign(val) == 0)


def is_negative(val: float) -> bool:
    """True if the sign of the value is exactly negative"""
    return bool(np.sign(val) == -1)


def is_positive(val: float) -> bool:
    """True if the sign of the value is exactly positive"""
    return bool(np.sign(val) == 1)
