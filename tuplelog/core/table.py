"""
Table and descriptor model.

A Table holds display header, minimum tuple length, the inferred type
profile and the accepted value tuples. A TableDescriptor is the part of a
table the action log cannot rebuild (header + min_tuple_len).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import FormatError
from .types import FieldType, infer_types_from

DEFAULT_SPACE = "default"

# (space_name, table_name)
TableKey = Tuple[str, str]


def descriptor_key(key: TableKey) -> str:
    """Composite "<space>:<table>" key used in the serialized form."""
    space_name, table_name = key
    return f"{space_name}:{table_name}"


def parse_descriptor_key(raw: str) -> TableKey:
    """
    Split a serialized descriptor key at the first ":".

    Raises:
        FormatError: If raw has no ":" separator
    """
    space_name, sep, table_name = raw.partition(":")
    if not sep:
        raise FormatError(f"Invalid table descriptor key: {raw!r}")
    return space_name, table_name


def resolve_descriptor_key(raw: str, space_names: Iterable[str]) -> TableKey:
    """
    Split a serialized descriptor key using known space names.

    The longest space name followed by ":" wins, so a space called
    "work:2024" is not mistaken for space "work". Without a matching
    space the key is split at the first ":".

    Raises:
        FormatError: If no space matches and raw has no ":" separator
    """
    matches = [s for s in space_names if raw.startswith(s + ":")]
    if not matches:
        return parse_descriptor_key(raw)
    space_name = max(matches, key=len)
    return space_name, raw[len(space_name) + 1:]


@dataclass(frozen=True)
class TableDescriptor:
    """
    Header and minimum tuple length of a table.

    Fields:
        header: Column names (display metadata, not length-checked)
        min_tuple_len: Tuples shorter than this are rejected
    """
    header: Tuple[str, ...] = ()
    min_tuple_len: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"header": list(self.header), "minTupleLen": self.min_tuple_len}

    @staticmethod
    def from_dict(data: Any) -> "TableDescriptor":
        """
        Build a descriptor from its serialized form.

        Raises:
            FormatError: If header is not a list of strings or minTupleLen
                is not a non-negative integer
        """
        if not isinstance(data, dict):
            raise FormatError("Table descriptor must be an object")
        header = data.get("header")
        min_tuple_len = data.get("minTupleLen")
        if not isinstance(header, list) or not all(isinstance(h, str) for h in header):
            raise FormatError("Table descriptor header must be a list of strings")
        if isinstance(min_tuple_len, bool) or not isinstance(min_tuple_len, int) or min_tuple_len < 0:
            raise FormatError("Table descriptor minTupleLen must be a non-negative integer")
        return TableDescriptor(header=tuple(header), min_tuple_len=min_tuple_len)


@dataclass(frozen=True)
class TableInfo:
    """Snapshot of a table's header and type profile (copies, never live lists)."""
    header: List[str]
    types: Optional[List[FieldType]]


@dataclass
class Table:
    """
    Mutable table state owned by a Database.

    types is None until the first inference. values only ever receives
    tuples that passed validation at insertion time (or, on replay, every
    logged tuple).
    """
    header: List[str] = field(default_factory=list)
    min_tuple_len: int = 0
    types: Optional[List[FieldType]] = None
    values: List[Tuple[Any, ...]] = field(default_factory=list)

    def define_header(self, header: Sequence[str]) -> None:
        """Replace the header. Types, values and min_tuple_len are untouched."""
        self.header = list(header)

    def infer_types(self) -> List[FieldType]:
        """
        Re-derive the type profile from the longest stored tuple.

        Ties go to the first tuple of that length. With no stored values
        the current profile is left as is and an empty list is returned.
        """
        if not self.values:
            return []
        fullest = max(self.values, key=len)
        self.types = infer_types_from(fullest)
        return list(self.types)

    def info(self) -> TableInfo:
        return TableInfo(
            header=list(self.header),
            types=list(self.types) if self.types is not None else None,
        )

    def descriptor(self) -> TableDescriptor:
        return TableDescriptor(header=tuple(self.header), min_tuple_len=self.min_tuple_len)

    def apply_descriptor(self, descriptor: TableDescriptor) -> None:
        self.header = list(descriptor.header)
        self.min_tuple_len = descriptor.min_tuple_len
