"""
Deterministic fingerprint of a serialized database.
"""

import hashlib
from typing import Any

from .canonical import canonical_json_bytes


def compute_fingerprint(payload: Any) -> str:
    """
    Compute SHA-256 of the canonical JSON form of payload.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(payload)).hexdigest()
