"""
Tests for serialize / deserialize.

Critical: deserialize(serialize(db)) must equal db.
"""

import json

import pytest

from tuplelog.core.database import Database
from tuplelog.core.errors import FormatError, MissingDescriptorError, SerializationError
from tuplelog.core.types import FieldType


def test_round_trip_header_defined_after_actions():
    db = Database()
    assert db.action(["Expenses", "meal", 600, "meat, bread, milk, etc."]) is True
    assert db.action(["Expenses", "meal", 300, "eat out"]) is True
    db.define_header("Expenses", ["destination", "sum", "comment"])

    restored = Database.deserialize(db.serialize())

    assert restored == db
    assert restored.get_table_info("Expenses").header == ["destination", "sum", "comment"]
    assert restored.get_table_info("Expenses").types == [
        FieldType.STRING,
        FieldType.NUMBER,
        FieldType.STRING,
    ]


def test_round_trip_empty_database():
    db = Database()
    assert Database.deserialize(db.serialize()) == db


def test_round_trip_many_spaces_and_kinds():
    db = Database()
    db.define_header("Expenses", ["destination", "sum", "comment"])
    db.define_min_tuple_len("Expenses", 2)
    db.action(["Expenses", "meal", 600])
    db.action(["Expenses", "meal", 300, "eat out"])
    db.infer_types_for("Expenses")
    db.action(["Trips", "Berlin", True, None, {"km": 540}, [1, 2]], "work")
    db.action(["Trips", "Paris", False, None, {"km": 880}, []], "work")
    db.action(["Notes", "日本語"], "work")

    restored = Database.deserialize(db.serialize())

    assert restored == db
    assert restored.get_values("Trips", "work")[0] == ("Berlin", True, None, {"km": 540}, [1, 2])
    assert restored.get_table_descriptors() == db.get_table_descriptors()


def test_round_trip_keeps_header_only_tables():
    """Tables with no logged action survive through their descriptor."""
    db = Database()
    db.define_header("Planned", ["a", "b"])
    db.get_table_info("Peeked", "other")

    restored = Database.deserialize(db.serialize())

    assert restored == db
    assert restored.table_names("other") == ["Peeked"]
    assert restored.get_table_info("Planned").types is None


def test_round_trip_space_name_with_colon():
    """Descriptor keys are matched per table, never split blindly."""
    db = Database()
    db.action(["Trips", "Berlin"], "work:2024")
    db.define_header("Trips", ["city"], "work:2024")
    db.define_header("Planned", ["when"], "work:2024")

    restored = Database.deserialize(db.serialize())

    assert restored == db
    assert restored.table_names("work:2024") == ["Trips", "Planned"]
    assert restored.get_table_info("Trips", "work:2024").header == ["city"]


def test_replay_does_not_validate():
    """A rejected action is materialized when the log is replayed."""
    db = Database()
    db.action(["T", "a", 1])
    assert db.action(["T", 2, "b"]) is False

    restored = Database.deserialize(db.serialize())

    assert restored.get_values("T") == [("a", 1), (2, "b")]
    assert restored != db


def test_serialized_form():
    db = Database()
    db.action(["Expenses", "meal", 600])
    db.define_header("Expenses", ["destination", "sum"])

    payload = json.loads(db.serialize())

    assert payload == {
        "actions": {"default": [["Expenses", "meal", 600]]},
        "tableDescriptors": {
            "default:Expenses": {"header": ["destination", "sum"], "minTupleLen": 0},
        },
    }


def test_serialize_is_deterministic():
    a = Database()
    a.action(["X", 1], "s1")
    a.action(["Y", 2], "s2")
    b = Database()
    b.action(["Y", 2], "s2")
    b.action(["X", 1], "s1")

    assert a.serialize() == b.serialize()
    assert a.fingerprint() == b.fingerprint()
    assert Database.serialize_db(a) == a.serialize()


def test_fingerprint_changes_with_state():
    db = Database()
    before = db.fingerprint()
    db.action(["T", 1])
    assert db.fingerprint() != before
    assert len(db.fingerprint()) == 64


def test_constructor_replays_log():
    db = Database({"default": [["T", "a"], ["T", "b", 2]]})

    assert db.get_values("T") == [("a",), ("b", 2)]
    assert db.get_table_info("T").types == [FieldType.STRING, FieldType.NUMBER]


@pytest.mark.parametrize(
    "source",
    [
        "not json",
        "[]",
        "{}",
        '{"actions": {}}',
        '{"tableDescriptors": {}}',
        '{"actions": [], "tableDescriptors": {}}',
        '{"actions": {"default": [[1, 2]]}, "tableDescriptors": {}}',
        '{"actions": {"default": [[]]}, "tableDescriptors": {}}',
        '{"actions": {"default": "T"}, "tableDescriptors": {}}',
        '{"actions": {}, "tableDescriptors": {"nocolon": {"header": [], "minTupleLen": 0}}}',
        '{"actions": {}, "tableDescriptors": {"default:T": {"header": []}}}',
    ],
)
def test_deserialize_rejects_bad_format(source):
    with pytest.raises(FormatError):
        Database.deserialize(source)


def test_deserialize_requires_descriptor_for_replayed_table():
    source = json.dumps({"actions": {"default": [["T", 1]]}, "tableDescriptors": {}})
    with pytest.raises(MissingDescriptorError):
        Database.deserialize(source)


def test_serialize_rejects_non_json_values():
    db = Database()
    db.action(["T", object()])
    with pytest.raises(SerializationError):
        db.serialize()
