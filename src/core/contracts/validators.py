"""
JSON Schema Contract Validators

Validates serialized matrices against formal JSON Schema contracts using the
jsonschema library (draft 2020-12).

Schemas (shipped in contracts/schema/):
- hmatrix.json       : object form {xScale, xSkew, ySkew, yScale, dx, dy}
- hmatrix_list.json  : ordered form [xScale, xSkew, dx, ySkew, yScale, dy]
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Looks up schemas in the schema/ directory next to this module unless a
    directory is given explicitly.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir else Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'hmatrix')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Check validity without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Iterate over every ValidationError found in data."""
        return self.validator.iter_errors(data)


class HMatrixValidator(ContractValidator):
    """Validator for the hmatrix object contract."""

    def __init__(self):
        super().__init__("hmatrix")


class HMatrixListValidator(ContractValidator):
    """Validator for the hmatrix_list ordered-form contract."""

    def __init__(self):
        super().__init__("hmatrix_list")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_hmatrix(data: Dict[str, Any]) -> None:
    """
    Validate an hmatrix object.

    Raises:
        ValidationError: If the data does not match the schema
    """
    HMatrixValidator().validate(data)


def validate_hmatrix_list(data: Any) -> None:
    """
    Validate an hmatrix ordered list.

    Raises:
        ValidationError: If the data does not match the schema
    """
    HMatrixListValidator().validate(data)
