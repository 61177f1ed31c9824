"""
Exception types for the tuple store.

Data errors (bad table name, short tuple, type mismatch) are not
exceptions: Database.action() reports them by returning False.
"""


class TupleLogError(Exception):
    """Base class for structural tuple store failures."""
    pass


class FormatError(TupleLogError):
    """Raised when serialized input does not have the expected structure."""
    pass


class SerializationError(TupleLogError):
    """Raised when stored values cannot be encoded as JSON."""
    pass


class MissingDescriptorError(TupleLogError):
    """Raised when a known table has no entry in a descriptor map."""

    def __init__(self, space_name: str, table_name: str) -> None:
        super().__init__(f"No table descriptor for {space_name}:{table_name}")
        self.space_name = space_name
        self.table_name = table_name
