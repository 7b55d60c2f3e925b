"""
Serialization — JSON hooks for HMatrix

Two wire forms:
- Object form: {"xScale", "xSkew", "ySkew", "yScale", "dx", "dy"}
- Ordered form: [xScale, xSkew, dx, ySkew, yScale, dy] (see to_list/from_list)

Decoding validates against the JSON Schema contract first, then builds a
frozen pydantic payload, then the HMatrix value. Encoding goes the other way.
Only float-valued matrices are serializable.
"""

import json
from typing import Any, Dict

from pydantic import BaseModel, Field

from src.core.contracts.validators import validate_hmatrix, validate_hmatrix_list
from src.core.domain.hmatrix import HMatrix, from_list, to_list


class HMatrixPayload(BaseModel):
    """
    Wire model of an HMatrix (object form).

    Immutable (frozen=True); unknown keys are rejected.
    """

    x_scale: float = Field(..., alias="xScale", description="a")
    x_skew: float = Field(..., alias="xSkew", description="c")
    y_skew: float = Field(..., alias="ySkew", description="b")
    y_scale: float = Field(..., alias="yScale", description="d")
    dx: float = Field(..., description="e")
    dy: float = Field(..., description="f")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    @classmethod
    def from_hmatrix(cls, m: HMatrix) -> "HMatrixPayload":
        return cls(
            x_scale=m.x_scale,
            x_skew=m.x_skew,
            y_skew=m.y_skew,
            y_scale=m.y_scale,
            dx=m.dx,
            dy=m.dy,
        )

    def to_hmatrix(self) -> HMatrix:
        return HMatrix(
            x_scale=self.x_scale,
            x_skew=self.x_skew,
            y_skew=self.y_skew,
            y_scale=self.y_scale,
            dx=self.dx,
            dy=self.dy,
        )


# =============================================================================
# OBJECT FORM
# =============================================================================


def hmatrix_to_dict(m: HMatrix) -> Dict[str, float]:
    """Object form with camelCase keys."""
    return HMatrixPayload.from_hmatrix(m).model_dump(by_alias=True)


def hmatrix_from_dict(data: Dict[str, Any]) -> HMatrix:
    """
    Decode the object form.

    Raises:
        jsonschema.ValidationError: If data violates the hmatrix contract
    """
    validate_hmatrix(data)
    return HMatrixPayload.model_validate(data).to_hmatrix()


def hmatrix_to_json(m: HMatrix) -> str:
    return HMatrixPayload.from_hmatrix(m).model_dump_json(by_alias=True)


def hmatrix_from_json(text: str) -> HMatrix:
    """Decode JSON text of the object form."""
    return hmatrix_from_dict(json.loads(text))


# =============================================================================
# ORDERED FORM
# =============================================================================


def hmatrix_to_list_json(m: HMatrix) -> str:
    return json.dumps([float(v) for v in to_list(m)])


def hmatrix_list_from_json(text: str) -> HMatrix:
    """
    Decode JSON text of the ordered form.

    Raises:
        InvalidArity: If the array does not hold exactly 6 elements
        jsonschema.ValidationError: If the data is not an array of numbers
    """
    data = json.loads(text)
    if not isinstance(data, list):
        validate_hmatrix_list(data)

    m = from_list(data)
    validate_hmatrix_list(data)
    return m
