"""Schema source exports."""

from .source_discovery import (
    SchemaParseError,
    SchemaSourceError,
    discover_schema_files,
    read_schema_document,
)
from .source_models import SchemaFile

__all__ = [
    "SchemaFile",
    "SchemaParseError",
    "SchemaSourceError",
    "discover_schema_files",
    "read_schema_document",
]
