"""
Tests for type inference and tuple validation.
"""

from tuplelog.core.types import FieldType, field_type_of, infer_types_from, validate_tuple


def test_field_type_of_scalars():
    """Each value kind maps to its tag."""
    assert field_type_of("meal") == FieldType.STRING
    assert field_type_of(600) == FieldType.NUMBER
    assert field_type_of(3.5) == FieldType.NUMBER
    assert field_type_of(True) == FieldType.BOOLEAN
    assert field_type_of(None) == FieldType.UNDEFINED


def test_bool_is_not_a_number():
    """bool subclasses int but must be tagged BOOLEAN."""
    assert field_type_of(False) == FieldType.BOOLEAN
    assert field_type_of(0) == FieldType.NUMBER


def test_containers_are_objects():
    """Lists, dicts and arbitrary objects fall into OBJECT."""
    assert field_type_of([1, 2]) == FieldType.OBJECT
    assert field_type_of({"a": 1}) == FieldType.OBJECT
    assert field_type_of(object()) == FieldType.OBJECT


def test_infer_types_from_tuple():
    """Profile has one tag per element, in order."""
    assert infer_types_from(("meal", 600, "eat out")) == [
        FieldType.STRING,
        FieldType.NUMBER,
        FieldType.STRING,
    ]
    assert infer_types_from(()) == []


def test_field_type_values_are_wire_names():
    """Tags compare equal to their serialized names."""
    assert FieldType.STRING == "string"
    assert FieldType("undefined") is FieldType.UNDEFINED


def test_validate_rejects_short_tuple():
    assert validate_tuple(("meal",), min_tuple_len=2, types=[]) is False
    assert validate_tuple(("meal", 1), min_tuple_len=2, types=[]) is True


def test_validate_rejects_type_mismatch():
    types = [FieldType.STRING, FieldType.NUMBER]
    assert validate_tuple(("meal", "600"), types=types) is False
    assert validate_tuple((600, 600), types=types) is False


def test_validate_ignores_positions_beyond_profile():
    """A tuple longer than the profile is valid; extra positions are unchecked."""
    types = [FieldType.STRING, FieldType.NUMBER]
    assert validate_tuple(("meal", 300, "eat out"), types=types) is True
    assert validate_tuple(("meal", 300, 42, None), types=types) is True


def test_validate_shorter_than_profile():
    """Only positions present in both are compared."""
    types = [FieldType.STRING, FieldType.NUMBER, FieldType.STRING]
    assert validate_tuple(("meal",), types=types) is True
    assert validate_tuple((1,), types=types) is False


def test_validate_without_types():
    assert validate_tuple(("anything", 1, None)) is True
