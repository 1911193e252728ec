"""Schema tree transformation exports."""

from .conditional_stripping import is_conditional_schema, strip_conditionals
from .definition_extraction import (
    CollisionPolicy,
    DefinitionCollisionError,
    extract_definitions,
    file_definitions,
)
from .reference_rewriting import UnresolvedReferenceError, rewrite_reference, rewrite_references

__all__ = [
    "CollisionPolicy",
    "DefinitionCollisionError",
    "UnresolvedReferenceError",
    "extract_definitions",
    "file_definitions",
    "is_conditional_schema",
    "rewrite_reference",
    "rewrite_references",
    "strip_conditionals",
]
