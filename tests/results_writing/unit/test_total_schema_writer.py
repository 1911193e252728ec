"""Merged schema writer tests."""

from __future__ import annotations

import json
from pathlib import Path

from schema_merger.results_writing import (
    DRAFT_07_SCHEMA_URI,
    build_total_schema,
    render_total_schema,
    write_total_schema,
)


def test_build_total_schema_wraps_definitions() -> None:
    total = build_total_schema({"RoomSchema": {"type": "object"}})

    assert total == {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "definitions": {"RoomSchema": {"type": "object"}},
    }
    assert total["$schema"] == DRAFT_07_SCHEMA_URI


def test_render_total_schema_is_pretty_and_sorted() -> None:
    rendered = render_total_schema(build_total_schema({"b": {"type": "x"}, "a": {}}))

    assert rendered.endswith("}\n")
    assert rendered.splitlines()[1] == '  "$schema": "http://json-schema.org/draft-07/schema#",'
    assert rendered.index('"a"') < rendered.index('"b"')


def test_render_total_schema_is_stable_across_insertion_order() -> None:
    first = render_total_schema(build_total_schema({"a": {"x": 1, "y": 2}, "b": {}}))
    second = render_total_schema(build_total_schema({"b": {}, "a": {"y": 2, "x": 1}}))

    assert first == second


def test_write_total_schema_creates_parent_directories(tmp_path: Path) -> None:
    output_path = tmp_path / "generated" / "m3-total.schema.json"

    written = write_total_schema(build_total_schema({"A": {"type": "string"}}), output_path)

    assert written == output_path.resolve()
    assert json.loads(output_path.read_text(encoding="utf-8"))["definitions"] == {
        "A": {"type": "string"}
    }
