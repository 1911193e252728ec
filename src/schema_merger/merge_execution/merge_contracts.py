"""Merge execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MergeRequest:
    """Input contract for one merge run; unset values fall back to env, config file and defaults."""

    config_path: str | None = None
    schema_dir: str | None = None
    output_path: str | None = None
    on_collision: str | None = None


@dataclass(frozen=True)
class MergeOutcome:
    """Output contract for one completed merge run."""

    output_path: Path
    schema_count: int
    definition_count: int
