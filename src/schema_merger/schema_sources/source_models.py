"""Schema source entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaFile:
    """One schema document found in the source directory."""

    filename: str
    path: Path
    type_name: str
