"""
Core math modules for the 2D transform kernel.

Matrix algebra, parameter decomposition and numerical primitives.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_DECOMPOSE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_MATRIX_CLOSE,
    # Checks and comparisons
    euclidean_norm,
    is_close,
    is_valid_float,
    is_zero,
)

# Transforms
from src.core.math.transforms import (
    apply,
    apply_to_polygon,
    are_close,
    compose,
    compose_chain,
    distance,
    rotation,
    rotation_about,
    scaling,
    translation,
)

# Decomposition
from src.core.math.decomposition import (
    TransformParams,
    decompose,
    reconstruct,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_DECOMPOSE",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_MATRIX_CLOSE",
    # Numerical Safeguards — Checks and comparisons
    "euclidean_norm",
    "is_close",
    "is_valid_float",
    "is_zero",
    # Transforms — Construction
    "rotation",
    "rotation_about",
    "scaling",
    "translation",
    # Transforms — Composition
    "compose",
    "compose_chain",
    # Transforms — Application
    "apply",
    "apply_to_polygon",
    # Transforms — Distance
    "are_close",
    "distance",
    # Decomposition
    "TransformParams",
    "decompose",
    "reconstruct",
]
