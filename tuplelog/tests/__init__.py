"""
Test suite for the tuple store.

Focus areas:
- Type inference and validation
- Log vs. materialized state
- Serialization round-trip
"""
