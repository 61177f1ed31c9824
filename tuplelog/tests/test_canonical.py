"""
Tests for canonical JSON encoding.
"""

import pytest

from tuplelog.core.canonical import canonicalize, canonical_json_bytes, canonical_json_str
from tuplelog.core.errors import SerializationError
from tuplelog.core.snapshot import compute_fingerprint


def test_canonicalize_dict_key_order():
    """Dict key order must not affect canonical output."""
    assert canonicalize({"z": 1, "a": 2}) == canonicalize({"a": 2, "z": 1})
    assert list(canonicalize({"z": 1, "a": 2}).keys()) == ["a", "z"]


def test_canonicalize_tuples_become_lists():
    """Stored actions are tuples; the wire form holds lists."""
    assert canonicalize({"default": [("T", 1, (2, 3))]}) == {"default": [["T", 1, [2, 3]]]}


def test_canonical_json_str_compact_sorted():
    assert canonical_json_str({"b": 2, "a": 1}) == '{"a":1,"b":2}'
    assert canonical_json_bytes({"b": 2, "a": 1}) == b'{"a":1,"b":2}'


def test_canonical_handles_unicode():
    """ensure_ascii=False keeps text unescaped."""
    assert "日本語" in canonical_json_str({"key": "日本語"})


def test_canonical_rejects_unencodable():
    with pytest.raises(SerializationError):
        canonical_json_str({"value": object()})


def test_fingerprint_ignores_insertion_order():
    assert compute_fingerprint({"a": 1, "b": [1]}) == compute_fingerprint({"b": [1], "a": 1})
    assert compute_fingerprint({"a": 1}) != compute_fingerprint({"a": 2})
