"""Merged schema document writer service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

DRAFT_07_SCHEMA_URI = "http://json-schema.org/draft-07/schema#"


def build_total_schema(definitions: Mapping[str, Any]) -> dict[str, Any]:
    """Wrap the merged definitions into a draft-07 document."""
    return {"$schema": DRAFT_07_SCHEMA_URI, "definitions": dict(definitions)}


def render_total_schema(total_schema: Mapping[str, Any]) -> str:
    """Serialize with sorted keys and two-space indentation so output diffs cleanly."""
    return json.dumps(total_schema, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def write_total_schema(total_schema: Mapping[str, Any], output_path: Path | str) -> Path:
    """Write the merged document, creating parent directories, and return its resolved path."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_total_schema(total_schema), encoding="utf-8")
    return destination.resolve()
