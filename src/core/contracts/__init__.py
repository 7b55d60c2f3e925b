"""
Contract Validation & Serialization Module

JSON Schema contracts and JSON hooks for HMatrix values.
"""

from .serialization import (
    HMatrixPayload,
    hmatrix_from_dict,
    hmatrix_from_json,
    hmatrix_list_from_json,
    hmatrix_to_dict,
    hmatrix_to_json,
    hmatrix_to_list_json,
)
from .validators import (
    ContractValidator,
    HMatrixListValidator,
    HMatrixValidator,
    SchemaLoader,
    validate_hmatrix,
    validate_hmatrix_list,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "HMatrixValidator",
    "HMatrixListValidator",
    "HMatrixPayload",
    # Validation
    "validate_hmatrix",
    "validate_hmatrix_list",
    # Serialization
    "hmatrix_to_dict",
    "hmatrix_from_dict",
    "hmatrix_to_json",
    "hmatrix_from_json",
    "hmatrix_to_list_json",
    "hmatrix_list_from_json",
]
