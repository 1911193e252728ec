"""Hoisting of nested ``definitions`` into the shared definitions map."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any

DEFINITIONS_KEY = "definitions"

_LOGGER = logging.getLogger(__name__)


class CollisionPolicy(str, Enum):
    """Behaviour when two entries are filed under the same definition name."""

    OVERWRITE = "overwrite"
    ERROR = "error"


class DefinitionCollisionError(Exception):
    """Raised when a definition name is filed twice under the error policy."""


def extract_definitions(
    schema: Any,
    definitions: MutableMapping[str, Any],
    *,
    on_collision: CollisionPolicy = CollisionPolicy.OVERWRITE,
    origin: str = "<schema>",
) -> Any:
    """Move ``schema["definitions"]`` into ``definitions`` and return the remaining schema.

    Schemas that are not objects, or carry no ``definitions`` key, are
    returned unchanged. A non-object ``definitions`` value is dropped.
    """
    if not isinstance(schema, Mapping) or DEFINITIONS_KEY not in schema:
        return schema

    remaining = {key: value for key, value in schema.items() if key != DEFINITIONS_KEY}
    extracted = schema[DEFINITIONS_KEY]
    if not isinstance(extracted, Mapping):
        _LOGGER.warning(
            "Dropping non-object definitions (%s) from %s", type(extracted).__name__, origin
        )
        return remaining

    file_definitions(definitions, extracted, on_collision=on_collision, origin=origin)
    return remaining


def file_definitions(
    definitions: MutableMapping[str, Any],
    entries: Mapping[str, Any],
    *,
    on_collision: CollisionPolicy = CollisionPolicy.OVERWRITE,
    origin: str = "<schema>",
) -> None:
    """Add ``entries`` to ``definitions`` applying the collision policy."""
    for name, value in entries.items():
        if name in definitions:
            if on_collision is CollisionPolicy.ERROR:
                raise DefinitionCollisionError(
                    f"Definition '{name}' from {origin} is already defined."
                )
            _LOGGER.warning("Definition '%s' from %s replaces an earlier one", name, origin)
        definitions[name] = value
