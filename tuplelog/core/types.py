"""
Type inference and tuple validation.

Pure functions: a tuple's type profile is the runtime kind of each element.
"""

from enum import Enum
from typing import Any, List, Optional, Sequence


class FieldType(str, Enum):
    """
    Kind of a single stored value.

    Values are the tag names used on the wire. Integers and floats share
    NUMBER so that a JSON round-trip never changes a tag.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    UNDEFINED = "undefined"


def field_type_of(value: Any) -> FieldType:
    """
    Get the FieldType of a single value.

    bool is tested before numbers since it subclasses int.
    None is the absent marker. Anything unrecognised is an OBJECT.
    """
    if value is None:
        return FieldType.UNDEFINED
    if isinstance(value, str):
        return FieldType.STRING
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldType.NUMBER
    return FieldType.OBJECT


def infer_types_from(values: Sequence[Any]) -> List[FieldType]:
    """
    Infer the type profile of a tuple.

    Args:
        values: Tuple values (without the table name)

    Returns:
        One FieldType per element, in order
    """
    return [field_type_of(v) for v in values]


def validate_tuple(
    values: Sequence[Any],
    min_tuple_len: int = 0,
    types: Optional[Sequence[FieldType]] = None,
) -> bool:
    """
    Check a tuple against a table's constraints.

    Rules:
    - shorter than min_tuple_len -> invalid
    - positions present in both tuple and types must have equal tags
    - positions beyond the known type profile are not checked

    Returns:
        True if the tuple is acceptable
    """
    if len(values) < min_tuple_len:
        return False
    types = types or []
    for expected, value in zip(types, values):
        if field_type_of(value) != expected:
            return False
    return True
