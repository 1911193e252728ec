"""Schema merge use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schema_merger.configuration import ConfigurationError, MergeSettings, load_settings
from schema_merger.results_writing import build_total_schema, write_total_schema
from schema_merger.schema_sources import (
    SchemaSourceError,
    discover_schema_files,
    read_schema_document,
)
from schema_merger.schema_transforms import (
    CollisionPolicy,
    DefinitionCollisionError,
    UnresolvedReferenceError,
    extract_definitions,
    file_definitions,
    rewrite_references,
    strip_conditionals,
)

from .merge_contracts import MergeOutcome, MergeRequest

_LOGGER = logging.getLogger(__name__)


class MergeExecutionError(Exception):
    """Raised when a merge run cannot be completed."""


def execute_schema_merge(
    request: MergeRequest, *, environ: Mapping[str, str] | None = None
) -> MergeOutcome:
    """Merge every schema of the source directory and write the total schema."""
    settings = _load_merge_settings(request, environ)
    try:
        schema_files = discover_schema_files(settings.schema_dir, settings.naming)
        name_table = {schema_file.filename: schema_file.type_name for schema_file in schema_files}
        documents = {
            schema_file.filename: read_schema_document(schema_file.path)
            for schema_file in schema_files
        }
        definitions = merge_schema_documents(
            documents, name_table, on_collision=settings.on_collision
        )
        output_path = write_total_schema(build_total_schema(definitions), settings.output_path)
    except (SchemaSourceError, UnresolvedReferenceError, DefinitionCollisionError, OSError) as exc:
        raise MergeExecutionError(str(exc)) from exc

    _LOGGER.info(
        "Merged %d schemas into %d definitions at %s",
        len(schema_files),
        len(definitions),
        output_path,
    )
    return MergeOutcome(
        output_path=output_path,
        schema_count=len(schema_files),
        definition_count=len(definitions),
    )


def merge_schema_documents(
    documents: Mapping[str, Any],
    name_table: Mapping[str, str],
    *,
    on_collision: CollisionPolicy = CollisionPolicy.OVERWRITE,
) -> dict[str, Any]:
    """Return the merged definitions map for already parsed schema documents.

    Args:
      documents: Parsed schema per filename; every filename must be in ``name_table``.
      name_table: Filename to type name mapping, complete for the whole corpus.
      on_collision: Policy applied when a definition name is filed twice.

    Returns:
      Extracted definitions followed by each processed schema under its type name.
    """
    definitions: dict[str, Any] = {}
    processed: list[tuple[str, str, Any]] = []
    for filename in sorted(documents):
        type_name = name_table[filename]
        _LOGGER.debug("Processing %s as %s", filename, type_name)
        try:
            tree = process_schema_document(
                documents[filename],
                type_name=type_name,
                name_table=name_table,
                definitions=definitions,
                on_collision=on_collision,
                origin=filename,
            )
        except UnresolvedReferenceError as exc:
            raise UnresolvedReferenceError(f"{filename}: {exc}") from exc
        processed.append((filename, type_name, tree))

    # Filed last so the schemas' own placement is never taken for a definitions key.
    for filename, type_name, tree in processed:
        file_definitions(definitions, {type_name: tree}, on_collision=on_collision, origin=filename)
    return definitions


def process_schema_document(
    document: Any,
    *,
    type_name: str,
    name_table: Mapping[str, str],
    definitions: dict[str, Any],
    on_collision: CollisionPolicy = CollisionPolicy.OVERWRITE,
    origin: str = "<schema>",
) -> Any:
    """Strip conditionals, rewrite references and hoist definitions of one schema."""
    stripped = strip_conditionals(document)
    rewritten = rewrite_references(stripped, type_name=type_name, name_table=name_table)
    return extract_definitions(rewritten, definitions, on_collision=on_collision, origin=origin)


def _load_merge_settings(request: MergeRequest, environ: Mapping[str, str] | None) -> MergeSettings:
    try:
        return load_settings(
            config_path=request.config_path,
            schema_dir=request.schema_dir,
            output_path=request.output_path,
            on_collision=request.on_collision,
            environ=environ,
        )
    except ConfigurationError as exc:
        raise MergeExecutionError(str(exc)) from exc
