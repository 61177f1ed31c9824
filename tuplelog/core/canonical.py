"""
Canonical JSON encoding for the serialized database.

Same database -> same string, whatever the dict insertion order.
"""

import json
from typing import Any

from .errors import SerializationError


def canonicalize(obj: Any) -> Any:
    """
    Convert nested dict/list/tuple data to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists
    - recursive normalization
    """
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string.

    Guarantees:
    - sort_keys=True
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 text as-is

    Raises:
        SerializationError: If obj holds values JSON cannot encode
    """
    try:
        canon = canonicalize(obj)
        return json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode database as JSON: {e}") from e


def canonical_json_bytes(obj: Any) -> bytes:
    """UTF-8 bytes of canonical_json_str(obj)."""
    return canonical_json_str(obj).encode("utf-8")
