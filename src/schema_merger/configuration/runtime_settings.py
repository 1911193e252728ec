"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_merger.schema_naming import DEFAULT_NAMING_PATTERN, NamingPattern
from schema_merger.schema_transforms import CollisionPolicy


@dataclass(frozen=True)
class MergeSettings:
    """Resolved settings for one merge run."""

    schema_dir: Path
    output_path: Path
    naming: NamingPattern = DEFAULT_NAMING_PATTERN
    on_collision: CollisionPolicy = CollisionPolicy.OVERWRITE
