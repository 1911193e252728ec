"""Schema filename to type name rules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class NamingPattern:
    """Filename circumfix and type name composition settings."""

    prefix: str = "m3-"
    suffix: str = ".schema.json"
    type_suffix: str = "Schema"
    separator: str = "-"


DEFAULT_NAMING_PATTERN = NamingPattern()


def match_schema_base(filename: str, pattern: NamingPattern = DEFAULT_NAMING_PATTERN) -> str | None:
    """Return the base name between prefix and suffix, or None when the filename does not match."""
    if len(filename) < len(pattern.prefix) + len(pattern.suffix):
        return None
    if not filename.startswith(pattern.prefix) or not filename.endswith(pattern.suffix):
        return None
    return filename[len(pattern.prefix) : len(filename) - len(pattern.suffix)]


def derive_type_name(base: str, pattern: NamingPattern = DEFAULT_NAMING_PATTERN) -> str:
    """Turn "foo-bar-baz" into "FooBarBazSchema".

    Only the first character of each segment is upper-cased; empty segments
    produced by repeated separators contribute nothing.
    """
    segments = base.split(pattern.separator) if pattern.separator else [base]
    return "".join(_uppercase_first(segment) for segment in segments) + pattern.type_suffix


def build_name_table(
    filenames: Iterable[str], pattern: NamingPattern = DEFAULT_NAMING_PATTERN
) -> dict[str, str]:
    """Map every matching filename to its derived type name."""
    table: dict[str, str] = {}
    for filename in filenames:
        base = match_schema_base(filename, pattern)
        if base is None:
            continue
        table[filename] = derive_type_name(base, pattern)
    return table


def _uppercase_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]
