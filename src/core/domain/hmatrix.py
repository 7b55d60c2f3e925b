"""
HMatrix — Homogeneous 2D Affine Matrix

Immutable value type for a 2D affine transform stored as the top two rows of a
3x3 homogeneous matrix. Field naming follows the SVG transform attribute
(a, b, c, d, e, f):

    [ x_scale  x_skew   dx ]      [ a  c  e ]
    [ y_skew   y_scale  dy ]  =   [ b  d  f ]
    [ 0        0        1  ]      [ 0  0  1 ]

The third row is implicit and never stored.

CRITICAL INVARIANTS:
1. Immutable (frozen=True): every operation returns a new matrix
2. Equality is componentwise and exact; use distance()/are_close() for tolerance
3. Ordered-list form is row-major: [x_scale, x_skew, dx, y_skew, y_scale, dy]
4. from_list() accepts exactly 6 elements, otherwise InvalidArity
"""

import logging
from dataclasses import dataclass
from typing import Any, Final, Generic, NamedTuple, Sequence, TypeVar

logger = logging.getLogger(__name__)

# Scalar type of a matrix: float, numpy array, autodiff value, ...
N = TypeVar("N")

# Number of stored entries (2 rows x 3 columns)
HMATRIX_ARITY: Final[int] = 6


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArity(ValueError):
    """
    Ordered list has the wrong number of elements for an HMatrix.

    Raised by from_list(); the input is never truncated or padded.
    """

    def __init__(self, actual: int, expected: int = HMATRIX_ARITY):
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"wrong length list for hmatrix: expected {expected} elements, got {actual}"
        )


# =============================================================================
# VALUE TYPES
# =============================================================================


class Pt2(NamedTuple):
    """
    2D point. Plain (x, y) tuples are accepted wherever a Pt2 is consumed.

    Coordinates share the scalar type of the HMatrix applied to them.
    """

    x: Any
    y: Any


@dataclass(frozen=True)
class HMatrix(Generic[N]):
    """Homogeneous 2D affine matrix (implicit last row [0 0 1])."""

    x_scale: N  # a
    x_skew: N  # c
    y_skew: N  # b
    y_scale: N  # d
    dx: N  # e
    dy: N  # f

    def __str__(self) -> str:
        return (
            f"[ {self.x_scale} {self.x_skew} {self.dx} ]\n"
            f"  {self.y_skew} {self.y_scale} {self.dy}  \n"
            "  0.0 0.0 1.0 ]"
        )


# =============================================================================
# CONSTRUCTION & LIST CONVERSION
# =============================================================================


def identity() -> HMatrix:
    """
    Identity matrix, the neutral element of compose().

    Examples:
        >>> to_list(identity())
        [1.0, 0.0, 0.0, 0.0, 1.0, 0.0]
    """
    return HMatrix(x_scale=1.0, x_skew=0.0, y_skew=0.0, y_scale=1.0, dx=0.0, dy=0.0)


def to_list(m: HMatrix) -> list:
    """First row, then second row: [x_scale, x_skew, dx, y_skew, y_scale, dy]."""
    return [m.x_scale, m.x_skew, m.dx, m.y_skew, m.y_scale, m.dy]


def from_list(values: Sequence) -> HMatrix:
    """
    Build a matrix from its row-major ordered-list form.

    Args:
        values: Exactly 6 scalars [x_scale, x_skew, dx, y_skew, y_scale, dy]

    Returns:
        New HMatrix

    Raises:
        InvalidArity: if len(values) != 6

    Examples:
        >>> from_list([1, 2, 3, 4, 5, 6]).dx
        3
        >>> from_list([1, 2, 3])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArity: ...
    """
    values = list(values)
    if len(values) != HMATRIX_ARITY:
        logger.debug("from_list rejected %d elements", len(values))
        raise InvalidArity(len(values))

    x_scale, x_skew, dx, y_skew, y_scale, dy = values
    return HMatrix(
        x_scale=x_scale,
        x_skew=x_skew,
        y_skew=y_skew,
        y_scale=y_scale,
        dx=dx,
        dy=dy,
    )
