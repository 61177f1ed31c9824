"""
Database: spaces of tables driven by an append-only action log.

The action log is the source of truth. Live insertion validates a tuple
before materializing it; replay from a log materializes every logged
tuple and then re-infers each table's types. Headers and minimum tuple
lengths travel separately as table descriptors.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .canonical import canonical_json_str
from .errors import FormatError, MissingDescriptorError
from .snapshot import compute_fingerprint
from .table import (
    DEFAULT_SPACE,
    Table,
    TableDescriptor,
    TableInfo,
    TableKey,
    descriptor_key,
    resolve_descriptor_key,
)
from .types import FieldType, infer_types_from, validate_tuple

logger = logging.getLogger(__name__)

# (table_name, v1, v2, ...)
Action = Tuple[Any, ...]


class Database:
    """
    In-memory tuple store.

    Usage:
        db = Database()
        db.define_header("Expenses", ["destination", "sum", "comment"])
        db.action(["Expenses", "meal", 600])
        restored = Database.deserialize(db.serialize())
        assert restored == db

    Not thread-safe: concurrent callers must serialize access themselves.
    """

    def __init__(self, actions: Optional[Mapping[str, Sequence[Sequence[Any]]]] = None) -> None:
        """
        Args:
            actions: Prior action log by space name. Each space is replayed
                without validation, then its tables' types are re-inferred.

        Raises:
            FormatError: If a logged action does not start with a table name
        """
        self._spaces: Dict[str, Dict[str, Table]] = {DEFAULT_SPACE: {}}
        self._actions: Dict[str, List[Action]] = {}
        if actions:
            for space_name, action_log in actions.items():
                self._restore_from_log(action_log, space_name)

    @staticmethod
    def serialize_db(db: "Database") -> str:
        """
        Encode the full action log and descriptor map as canonical JSON.

        Raises:
            SerializationError: If a stored value is not JSON-encodable
        """
        return canonical_json_str(db._payload())

    @staticmethod
    def deserialize(source: str) -> "Database":
        """
        Rebuild a Database from serialize() output.

        Actions are replayed first, then descriptors are applied. Replayed
        tables look up their descriptor by exact "<space>:<table>" key.
        Tables known only from the descriptor map (no logged action) are
        created empty so that header-only tables survive the round-trip.

        Raises:
            FormatError: If source is not the expected structure
            MissingDescriptorError: If a replayed table has no descriptor
        """
        try:
            payload = json.loads(source)
        except (TypeError, ValueError) as e:
            raise FormatError(f"Failed to deserialize. Invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise FormatError("Failed to deserialize. Wrong data format.")
        actions = payload.get("actions")
        raw_descriptors = payload.get("tableDescriptors")
        if not isinstance(actions, dict) or not isinstance(raw_descriptors, dict):
            raise FormatError("Failed to deserialize. Wrong data format.")

        by_wire_key = {
            key: TableDescriptor.from_dict(value) for key, value in raw_descriptors.items()
        }

        db = Database(actions)
        descriptors: Dict[TableKey, TableDescriptor] = {}
        for key in db.get_table_descriptors():
            wire_key = descriptor_key(key)
            if wire_key in by_wire_key:
                descriptors[key] = by_wire_key.pop(wire_key)

        # Left over: tables that never saw an action
        for wire_key, descriptor in by_wire_key.items():
            space_name, table_name = resolve_descriptor_key(wire_key, db.space_names())
            db._assert_table(table_name, space_name)
            descriptors[(space_name, table_name)] = descriptor
        db.set_table_descriptors(descriptors)

        logger.info(
            "Deserialized database",
            extra={"spaces": len(db._spaces), "tables": len(descriptors)},
        )
        return db

    def serialize(self) -> str:
        return Database.serialize_db(self)

    def action(self, act: Sequence[Any], space_name: str = DEFAULT_SPACE) -> bool:
        """
        Submit an action: table name followed by the tuple values.

        The action is logged as soon as its table exists, whether or not
        the tuple passes validation. The first action on a table fixes its
        initial type profile.

        Returns:
            True if the tuple was stored, False if it was rejected
        """
        if not act or not isinstance(act[0], str):
            logger.debug("Rejected action without table name", extra={"space": space_name})
            return False

        table_name = act[0]
        table = self._assert_table(table_name, space_name)
        self._actions[space_name].append(tuple(act))

        values = tuple(act[1:])
        if table.types is None:
            table.types = infer_types_from(values)

        if not validate_tuple(values, min_tuple_len=table.min_tuple_len, types=table.types):
            logger.debug(
                "Tuple failed validation for %s",
                table_name,
                extra={"space": space_name},
            )
            return False

        table.values.append(values)
        return True

    def define_header(
        self, table_name: str, header: Sequence[str], space_name: str = DEFAULT_SPACE
    ) -> None:
        self._assert_table(table_name, space_name).define_header(header)

    def define_min_tuple_len(
        self, table_name: str, min_tuple_len: int, space_name: str = DEFAULT_SPACE
    ) -> None:
        """
        Set the minimum tuple length for future actions on a table.

        Already stored tuples are not re-checked.

        Raises:
            ValueError: If min_tuple_len is negative
        """
        if min_tuple_len < 0:
            raise ValueError(f"min_tuple_len must be >= 0, got {min_tuple_len}")
        self._assert_table(table_name, space_name).min_tuple_len = min_tuple_len

    def get_table_descriptors(self) -> Dict[TableKey, TableDescriptor]:
        """Descriptor of every known table, keyed by (space, table)."""
        return {
            (space_name, table_name): table.descriptor()
            for space_name, space in self._spaces.items()
            for table_name, table in space.items()
        }

    def set_table_descriptors(self, descriptors: Mapping[TableKey, TableDescriptor]) -> None:
        """
        Overwrite header and min_tuple_len of every known table.

        Raises:
            MissingDescriptorError: If any known table is absent from descriptors
        """
        for space_name, space in self._spaces.items():
            for table_name, table in space.items():
                descriptor = descriptors.get((space_name, table_name))
                if descriptor is None:
                    raise MissingDescriptorError(space_name, table_name)
                table.apply_descriptor(descriptor)

    def get_table_info(self, table_name: str, space_name: str = DEFAULT_SPACE) -> TableInfo:
        """
        Snapshot of a table's header and types.

        Reading a table that does not exist creates it empty.
        """
        return self._assert_table(table_name, space_name).info()

    def infer_types_for(self, table_name: str, space_name: str = DEFAULT_SPACE) -> List[FieldType]:
        """
        Re-infer a table's types from its longest stored tuple.

        Unknown spaces or tables are not created; an empty list is returned.
        """
        table = self._spaces.get(space_name, {}).get(table_name)
        if table is None:
            return []
        return table.infer_types()

    def get_actions(self, space_name: str = DEFAULT_SPACE) -> List[Action]:
        """Copy of a space's action log (empty for unknown spaces)."""
        return list(self._actions.get(space_name, []))

    def get_values(self, table_name: str, space_name: str = DEFAULT_SPACE) -> List[Tuple[Any, ...]]:
        """Copy of a table's stored tuples (empty for unknown tables)."""
        table = self._spaces.get(space_name, {}).get(table_name)
        return list(table.values) if table is not None else []

    def space_names(self) -> List[str]:
        return list(self._spaces)

    def table_names(self, space_name: str = DEFAULT_SPACE) -> List[str]:
        return list(self._spaces.get(space_name, {}))

    def fingerprint(self) -> str:
        """SHA-256 of the canonical serialized form."""
        return compute_fingerprint(self._payload())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Database):
            return NotImplemented
        return self._spaces == other._spaces and self._actions == other._actions

    def __repr__(self) -> str:
        tables = sum(len(space) for space in self._spaces.values())
        return f"Database(spaces={len(self._spaces)}, tables={tables})"

    def _payload(self) -> Dict[str, Any]:
        return {
            "actions": {
                space_name: [list(act) for act in action_log]
                for space_name, action_log in self._actions.items()
            },
            "tableDescriptors": {
                descriptor_key(key): descriptor.to_dict()
                for key, descriptor in self.get_table_descriptors().items()
            },
        }

    def _assert_table(self, table_name: str, space_name: str) -> Table:
        space = self._assert_space(space_name)
        table = space.get(table_name)
        if table is None:
            table = space[table_name] = Table()
            logger.debug("Created table %s", table_name, extra={"space": space_name})
        return table

    def _assert_space(self, space_name: str) -> Dict[str, Table]:
        self._actions.setdefault(space_name, [])
        return self._spaces.setdefault(space_name, {})

    def _restore_from_log(self, action_log: Sequence[Sequence[Any]], space_name: str) -> None:
        if not isinstance(action_log, (list, tuple)):
            raise FormatError(f"Action log for space {space_name!r} must be a list")

        space = self._assert_space(space_name)
        for act in action_log:
            if not isinstance(act, (list, tuple)) or not act or not isinstance(act[0], str):
                raise FormatError(f"Malformed action in space {space_name!r}: {act!r}")
            table = self._assert_table(act[0], space_name)
            self._actions[space_name].append(tuple(act))
            table.values.append(tuple(act[1:]))

        for table in space.values():
            table.infer_types()

        logger.info(
            "Replayed %d actions",
            len(action_log),
            extra={"space": space_name},
        )
