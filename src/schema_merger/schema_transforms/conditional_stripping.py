"""Removal of if/then/else subschemas.

The type generator consuming the merged schema has no support for conditional
composition. In the schema corpus it only expresses conditionally required
properties, so dropping it leaves those properties optional.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def is_conditional_schema(node: Any) -> bool:
    """Return True for an object carrying both an ``if`` and a ``then`` key."""
    return isinstance(node, Mapping) and "if" in node and "then" in node


def strip_conditionals(node: Any) -> Any:
    """Return a copy of ``node`` without any nested conditional subschema."""
    if isinstance(node, Mapping):
        return {
            key: strip_conditionals(value)
            for key, value in node.items()
            if not is_conditional_schema(value)
        }
    if isinstance(node, list):
        # Array elements are filtered by value since they have no keys.
        return [strip_conditionals(item) for item in node if not is_conditional_schema(item)]
    return node
