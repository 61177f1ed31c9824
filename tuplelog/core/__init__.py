"""
Core tuple store primitives.

This module provides:
- FieldType: Kind tags for stored values
- infer_types_from / validate_tuple: Pure type profile functions
- Table / TableDescriptor / TableInfo: Table model
- Database: Spaces, tables and the action log
- Canonical: Deterministic JSON encoding
"""

from .types import FieldType, field_type_of, infer_types_from, validate_tuple
from .table import (
    DEFAULT_SPACE,
    Table,
    TableDescriptor,
    TableInfo,
    TableKey,
    descriptor_key,
    parse_descriptor_key,
    resolve_descriptor_key,
)
from .database import Action, Database
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .snapshot import compute_fingerprint
from .errors import FormatError, MissingDescriptorError, SerializationError, TupleLogError

__all__ = [
    "FieldType",
    "field_type_of",
    "infer_types_from",
    "validate_tuple",
    "DEFAULT_SPACE",
    "Table",
    "TableDescriptor",
    "TableInfo",
    "TableKey",
    "descriptor_key",
    "parse_descriptor_key",
    "resolve_descriptor_key",
    "Action",
    "Database",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "compute_fingerprint",
    "FormatError",
    "MissingDescriptorError",
    "SerializationError",
    "TupleLogError",
]
