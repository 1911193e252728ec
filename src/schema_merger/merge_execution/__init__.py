"""Merge execution domain exports."""

from .merge_contracts import MergeOutcome, MergeRequest
from .merge_use_case import (
    MergeExecutionError,
    execute_schema_merge,
    merge_schema_documents,
    process_schema_document,
)

__all__ = [
    "MergeRequest",
    "MergeOutcome",
    "MergeExecutionError",
    "execute_schema_merge",
    "merge_schema_documents",
    "process_schema_document",
]
