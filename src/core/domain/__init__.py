"""
Domain value types.

Contains the HMatrix affine matrix, the Pt2 point and canonical shapes.
"""

from src.core.domain.hmatrix import (
    HMATRIX_ARITY,
    HMatrix,
    InvalidArity,
    Pt2,
    from_list,
    identity,
    to_list,
)
from src.core.domain.shapes import UNIT_SQUARE, first_vertex_energy

__all__ = [
    # HMatrix
    "HMATRIX_ARITY",
    "HMatrix",
    "InvalidArity",
    "Pt2",
    "identity",
    "to_list",
    "from_list",
    # Shapes
    "UNIT_SQUARE",
    "first_vertex_energy",
]
