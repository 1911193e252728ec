"""Schema naming rule tests."""

from __future__ import annotations

import pytest
from schema_merger.schema_naming import (
    NamingPattern,
    build_name_table,
    derive_type_name,
    match_schema_base,
)


@pytest.mark.parametrize(
    ("base", "expected"),
    [
        ("room-state", "RoomStateSchema"),
        ("foo", "FooSchema"),
        ("foo--bar", "FooBarSchema"),
        ("-leading", "LeadingSchema"),
        ("already-CamelCase", "AlreadyCamelCaseSchema"),
        ("", "Schema"),
    ],
)
def test_derive_type_name_capitalizes_segments(base: str, expected: str) -> None:
    assert derive_type_name(base) == expected


def test_derive_type_name_keeps_rest_of_segment_untouched() -> None:
    assert derive_type_name("tech-IDs") == "TechIDsSchema"


def test_match_schema_base_strips_prefix_and_suffix() -> None:
    assert match_schema_base("m3-room-state.schema.json") == "room-state"


@pytest.mark.parametrize(
    "filename",
    ["room.schema.json", "m3-room.json", "README.md", "m3-.schema.jso", "m3.schema.json"],
)
def test_match_schema_base_rejects_other_names(filename: str) -> None:
    assert match_schema_base(filename) is None


def test_match_schema_base_accepts_custom_pattern() -> None:
    pattern = NamingPattern(prefix="x_", suffix=".json", type_suffix="Type", separator="_")

    assert match_schema_base("x_door_lock.json", pattern) == "door_lock"
    assert derive_type_name("door_lock", pattern) == "DoorLockType"


def test_build_name_table_skips_non_matching_filenames() -> None:
    table = build_name_table(
        ["m3-room.schema.json", "notes.txt", "m3-room-state.schema.json", "m3-room.json"]
    )

    assert table == {
        "m3-room.schema.json": "RoomSchema",
        "m3-room-state.schema.json": "RoomStateSchema",
    }
