"""Schema directory enumeration and document reading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from schema_merger.schema_naming import DEFAULT_NAMING_PATTERN, NamingPattern, build_name_table

from .source_models import SchemaFile

_LOGGER = logging.getLogger(__name__)


class SchemaSourceError(Exception):
    """Raised when the schema directory or a schema file cannot be read."""


class SchemaParseError(SchemaSourceError):
    """Raised when a schema file does not contain valid JSON."""


def discover_schema_files(
    schema_dir: Path | str, pattern: NamingPattern = DEFAULT_NAMING_PATTERN
) -> tuple[SchemaFile, ...]:
    """Return the schema files of ``schema_dir`` sorted by filename.

    Entries that are not regular files, or whose name does not match the
    naming pattern, are skipped.
    """
    directory = Path(schema_dir)
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise SchemaSourceError(f"Could not read schema directory '{directory}': {exc}") from exc

    regular_files = {entry.name: entry for entry in entries if entry.is_file()}
    name_table = build_name_table(regular_files, pattern)
    for filename in sorted(regular_files.keys() - name_table.keys()):
        _LOGGER.debug(
            "Skipping %s: name does not match %s*%s", filename, pattern.prefix, pattern.suffix
        )

    return tuple(
        SchemaFile(filename=filename, path=regular_files[filename], type_name=type_name)
        for filename, type_name in sorted(name_table.items())
    )


def read_schema_document(path: Path | str) -> Any:
    """Read and parse one JSON schema document."""
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaSourceError(f"Could not read schema file '{source}': {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaParseError(f"Invalid JSON in schema file '{source}': {exc}") from exc
