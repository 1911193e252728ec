"""Results writing exports."""

from .total_schema_writer import (
    DRAFT_07_SCHEMA_URI,
    build_total_schema,
    render_total_schema,
    write_total_schema,
)

__all__ = [
    "DRAFT_07_SCHEMA_URI",
    "build_total_schema",
    "render_total_schema",
    "write_total_schema",
]
