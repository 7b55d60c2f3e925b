"""
Scalar — Numeric-Generic Elementary Functions

The transform kernel is generic over its scalar type. Arithmetic (+, -, *, /)
works on anything that overloads it; the few transcendental functions the
kernel needs are routed through this module:

- Real numbers (int, float, numpy scalars) use the `math` module, so plain
  float inputs give plain float results.
- Everything else (numpy arrays, autodiff values, ...) goes through the numpy
  ufunc, which broadcasts over arrays and, for arbitrary objects, dispatches
  to the object's own method of the same name (`x.cos()`, `x.sqrt()`,
  `x.arctan()`).
"""

import math
import numbers

import numpy as np


def _is_real(x) -> bool:
    return isinstance(x, numbers.Real)


def cos(x):
    """Cosine of x (radians)."""
    if _is_real(x):
        return math.cos(x)
    return np.cos(x)


def sin(x):
    """Sine of x (radians)."""
    if _is_real(x):
        return math.sin(x)
    return np.sin(x)


def sqrt(x):
    """Square root of x. Real inputs must be non-negative."""
    if _is_real(x):
        return math.sqrt(x)
    return np.sqrt(x)


def atan(x):
    """
    One-argument arctangent, result in [-pi/2, pi/2].

    Not atan2: the quadrant of the original (y, x) pair is not recovered.
    """
    if _is_real(x):
        return math.atan(x)
    return np.arctan(x)
