"""
Numerical Safeguards — Epsilon Constants & Tolerant Comparisons

Epsilon parameters and float helpers shared by the transform kernel:
- Fixed denominator offset used by matrix decomposition
- Tolerances for float comparisons (scalars and matrices)
- NaN/Inf checks
- Euclidean norm over ordered sequences

CRITICAL INVARIANTS:
1. Constants are Final; per-call overrides go through `eps`/`tol` keywords
2. No function here mutates its inputs
3. Comparisons never use exact float equality
"""

import math
from typing import Final, Iterable

from src.core.math import scalar

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# Offset added to the x_scale denominator in decompose().
# Prevents atan(0/0) = NaN for matrices with x_scale == 0.
EPS_DECOMPOSE: Final[float] = 1e-10

# Relative tolerance for scalar comparisons (is_close)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for scalar comparisons (is_close)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Default threshold on distance() for are_close()
EPS_MATRIX_CLOSE: Final[float] = 1e-9


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Examples:
        >>> is_valid_float(1.0)
        True
        >>> is_valid_float(float('nan'))
        False
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare floats with machine-precision tolerance.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: First value
        b: Second value
        rel_tol: Relative tolerance (default: 1e-9)
        abs_tol: Absolute tolerance (default: 1e-12)

    Returns:
        True if the values are close

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True if abs(value) <= tol."""
    return abs(value) <= tol


# =============================================================================
# NORMS
# =============================================================================


def euclidean_norm(values: Iterable):
    """
    Euclidean (L2) norm of a sequence of scalars.

    Generic over the scalar type: the sum of squares uses plain arithmetic and
    the root goes through scalar.sqrt, so numpy arrays and autodiff values
    are accepted as elements.

    Examples:
        >>> euclidean_norm([3.0, 4.0])
        5.0
        >>> euclidean_norm([])
        0.0
    """
    total = 0.0
    for v in values:
        total = total + v * v
    return scalar.sqrt(total)
