"""Schema naming exports."""

from .naming_rules import (
    DEFAULT_NAMING_PATTERN,
    NamingPattern,
    build_name_table,
    derive_type_name,
    match_schema_base,
)

__all__ = [
    "DEFAULT_NAMING_PATTERN",
    "NamingPattern",
    "build_name_table",
    "derive_type_name",
    "match_schema_base",
]
