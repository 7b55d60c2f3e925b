"""
Tests for JSON Schema Contract Validators and HMatrix serialization

Covers:
- Validity of the schemas themselves
- Validation of well-formed data
- Detection of missing required keys
- Detection of type violations
- Detection of extra keys and wrong array lengths
- Integration with the pydantic payload model
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import (
    HMatrixListValidator,
    HMatrixPayload,
    HMatrixValidator,
    SchemaLoader,
    hmatrix_from_dict,
    hmatrix_from_json,
    hmatrix_list_from_json,
    hmatrix_to_dict,
    hmatrix_to_json,
    hmatrix_to_list_json,
    validate_hmatrix,
    validate_hmatrix_list,
)
from src.core.domain import HMatrix, InvalidArity, from_list
from src.core.math.transforms import rotation_about


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_hmatrix():
    """Valid hmatrix object."""
    return {
        "xScale": 1.0,
        "xSkew": 2.0,
        "ySkew": 4.0,
        "yScale": 5.0,
        "dx": 3.0,
        "dy": 6.0,
    }


@pytest.fixture
def sample_matrix() -> HMatrix:
    return from_list([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Every shipped schema loads and is a valid draft 2020-12 schema."""
    loader = SchemaLoader()

    hmatrix_schema = loader.load_schema("hmatrix")
    list_schema = loader.load_schema("hmatrix_list")

    Draft202012Validator.check_schema(hmatrix_schema)
    Draft202012Validator.check_schema(list_schema)
    assert hmatrix_schema["type"] == "object"
    assert list_schema["minItems"] == list_schema["maxItems"] == 6


def test_schema_loader_caches():
    loader = SchemaLoader()
    assert loader.load_schema("hmatrix") is loader.load_schema("hmatrix")


def test_schema_loader_missing_schema():
    loader = SchemaLoader()
    with pytest.raises(FileNotFoundError, match="Schema not found"):
        loader.load_schema("does_not_exist")


def test_schema_loader_missing_directory(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(tmp_path / "nope")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)
    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - HMATRIX OBJECT CONTRACT
# =============================================================================


def test_valid_hmatrix(valid_hmatrix):
    validate_hmatrix(valid_hmatrix)
    assert HMatrixValidator().is_valid(valid_hmatrix)


def test_hmatrix_accepts_integers(valid_hmatrix):
    valid_hmatrix["dx"] = 3
    validate_hmatrix(valid_hmatrix)


@pytest.mark.parametrize("key", ["xScale", "xSkew", "ySkew", "yScale", "dx", "dy"])
def test_hmatrix_missing_required_key(valid_hmatrix, key):
    del valid_hmatrix[key]
    with pytest.raises(ValidationError, match="is a required property"):
        validate_hmatrix(valid_hmatrix)


def test_hmatrix_wrong_type(valid_hmatrix):
    valid_hmatrix["xScale"] = "1.0"
    with pytest.raises(ValidationError, match="is not of type 'number'"):
        validate_hmatrix(valid_hmatrix)


def test_hmatrix_rejects_boolean(valid_hmatrix):
    valid_hmatrix["dy"] = True
    with pytest.raises(ValidationError):
        validate_hmatrix(valid_hmatrix)


def test_hmatrix_extra_key(valid_hmatrix):
    valid_hmatrix["dz"] = 0.0
    with pytest.raises(ValidationError, match="Additional properties are not allowed"):
        validate_hmatrix(valid_hmatrix)


def test_hmatrix_collects_all_errors(valid_hmatrix):
    valid_hmatrix["xScale"] = "a"
    del valid_hmatrix["dy"]
    errors = list(HMatrixValidator().iter_errors(valid_hmatrix))
    assert len(errors) == 2
    assert all(isinstance(e, ValidationError) for e in errors)


# =============================================================================
# TESTS - HMATRIX LIST CONTRACT
# =============================================================================


def test_valid_hmatrix_list():
    validate_hmatrix_list([1, 2, 3, 4, 5, 6])
    assert HMatrixListValidator().is_valid([0.0] * 6)


@pytest.mark.parametrize("data", [[1, 2, 3], [1.0] * 7, []])
def test_hmatrix_list_wrong_length(data):
    with pytest.raises(ValidationError):
        validate_hmatrix_list(data)


def test_hmatrix_list_wrong_item_type():
    with pytest.raises(ValidationError, match="is not of type 'number'"):
        validate_hmatrix_list([1, 2, 3, 4, 5, "6"])


# =============================================================================
# TESTS - SERIALIZATION
# =============================================================================


def test_to_dict_uses_camel_case(sample_matrix, valid_hmatrix):
    assert hmatrix_to_dict(sample_matrix) == valid_hmatrix


def test_to_dict_matches_contract(sample_matrix):
    validate_hmatrix(hmatrix_to_dict(sample_matrix))


def test_dict_round_trip(valid_hmatrix, sample_matrix):
    assert hmatrix_from_dict(valid_hmatrix) == sample_matrix


def test_json_round_trip():
    m = rotation_about(0.75, (2.0, -1.0))
    assert hmatrix_from_json(hmatrix_to_json(m)) == m


def test_from_dict_rejects_invalid(valid_hmatrix):
    valid_hmatrix["extra"] = 1.0
    with pytest.raises(ValidationError):
        hmatrix_from_dict(valid_hmatrix)


def test_list_json_round_trip(sample_matrix):
    text = hmatrix_to_list_json(sample_matrix)
    assert json.loads(text) == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert hmatrix_list_from_json(text) == sample_matrix


def test_list_json_wrong_length_is_invalid_arity():
    with pytest.raises(InvalidArity):
        hmatrix_list_from_json("[1, 2, 3]")


def test_list_json_wrong_item_type():
    with pytest.raises(ValidationError):
        hmatrix_list_from_json('[1, 2, 3, 4, 5, "x"]')


@pytest.mark.parametrize(
    "text",
    [
        "5",
        "null",
        "true",
        '"abcdef"',
        '{"a": 1, "b": 2, "c": 3, "d": 4, "e": 5, "f": 6}',
    ],
)
def test_list_json_not_an_array(text):
    """Non-array JSON is a contract violation, not an iteration error."""
    with pytest.raises(ValidationError, match="is not of type 'array'"):
        hmatrix_list_from_json(text)


# =============================================================================
# TESTS - PYDANTIC PAYLOAD
# =============================================================================


def test_payload_round_trip(sample_matrix):
    payload = HMatrixPayload.from_hmatrix(sample_matrix)
    assert payload.to_hmatrix() == sample_matrix


def test_payload_by_alias(valid_hmatrix):
    payload = HMatrixPayload.model_validate(valid_hmatrix)
    assert payload.x_scale == 1.0
    assert payload.y_skew == 4.0


def test_payload_frozen(sample_matrix):
    payload = HMatrixPayload.from_hmatrix(sample_matrix)
    with pytest.raises(PydanticValidationError, match="frozen"):
        payload.dx = 0.0


def test_payload_rejects_extra(valid_hmatrix):
    valid_hmatrix["dz"] = 0.0
    with pytest.raises(PydanticValidationError):
        HMatrixPayload.model_validate(valid_hmatrix)
