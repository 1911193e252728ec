"""Rewriting of ``$ref`` pointers for the merged document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REF_KEY = "$ref"
_LOCAL_PROPERTIES_PREFIX = "#/properties/"


class UnresolvedReferenceError(Exception):
    """Raised when a ``$ref`` cannot be mapped into the merged document."""


def rewrite_reference(reference: str, *, type_name: str, name_table: Mapping[str, str]) -> str:
    """Return the pointer ``reference`` must become once schemas live under ``definitions``.

    Args:
      reference: Original ``$ref`` value.
      type_name: Derived name of the schema the reference was found in.
      name_table: Filename to type name mapping for every merged schema.

    Returns:
      The rewritten reference.

    Raises:
      UnresolvedReferenceError: If a bare filename reference names no merged schema.
    """
    if reference.startswith(_LOCAL_PROPERTIES_PREFIX):
        # The schema itself moves to definitions/<type_name>.
        return f"#/definitions/{type_name}/{reference[2:]}"

    hash_index = reference.find("#")
    if hash_index > 0:
        # Fragment into another merged schema, the file part no longer matters.
        return reference[hash_index:]

    if hash_index < 0:
        target = name_table.get(reference)
        if target is None:
            raise UnresolvedReferenceError(
                f"Did not find schema for $ref '{reference}' in {type_name}."
            )
        return f"#/definitions/{target}"

    return reference


def rewrite_references(node: Any, *, type_name: str, name_table: Mapping[str, str]) -> Any:
    """Return a copy of ``node`` with every ``$ref`` value rewritten."""
    if isinstance(node, Mapping):
        rewritten: dict[str, Any] = {}
        for key, value in node.items():
            if key == REF_KEY:
                if not isinstance(value, str):
                    raise UnresolvedReferenceError(
                        f"$ref in {type_name} must be a string, got {type(value).__name__}."
                    )
                rewritten[key] = rewrite_reference(
                    value, type_name=type_name, name_table=name_table
                )
            else:
                rewritten[key] = rewrite_references(
                    value, type_name=type_name, name_table=name_table
                )
        return rewritten
    if isinstance(node, list):
        return [
            rewrite_references(item, type_name=type_name, name_table=name_table) for item in node
        ]
    return node
