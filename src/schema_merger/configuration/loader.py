"""Merge settings loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_merger.schema_naming import DEFAULT_NAMING_PATTERN, NamingPattern
from schema_merger.schema_transforms import CollisionPolicy

from .runtime_settings import MergeSettings

SCHEMA_DIR_ENV_VAR = "SM_JSON_DATA_SCHEMA_DIR"
DEFAULT_SCHEMA_DIR = "sm-json-data/schema"
DEFAULT_OUTPUT_PATH = "generated/m3-total.schema.json"


class ConfigurationError(Exception):
    """Raised when merge settings are invalid."""


def load_settings(
    *,
    config_path: Path | str | None = None,
    schema_dir: Path | str | None = None,
    output_path: Path | str | None = None,
    on_collision: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> MergeSettings:
    """Resolve merge settings.

    Explicit arguments win over the ``SM_JSON_DATA_SCHEMA_DIR`` environment
    variable, which wins over the optional YAML config file, which wins over
    the built-in defaults. Paths from the config file are relative to it.
    """
    env = os.environ if environ is None else environ
    file_settings: Mapping[str, Any] = {}
    base_path = Path.cwd()
    if config_path is not None:
        file_settings = _read_config_file(Path(config_path))
        base_path = Path(config_path).resolve().parent

    if schema_dir is not None:
        source, label = Path(schema_dir), "schema directory"
    elif SCHEMA_DIR_ENV_VAR in env:
        if not env[SCHEMA_DIR_ENV_VAR].strip():
            raise ConfigurationError(f"Invalid path {SCHEMA_DIR_ENV_VAR}: empty value")
        source, label = Path(env[SCHEMA_DIR_ENV_VAR]), SCHEMA_DIR_ENV_VAR
    elif file_settings.get("schema_dir") is not None:
        source = _resolve_path(
            base_path, _require_non_empty_string(file_settings["schema_dir"], "schema_dir")
        )
        label = "schema_dir"
    else:
        source, label = Path(DEFAULT_SCHEMA_DIR), "default schema directory"

    if output_path is not None:
        output = Path(output_path)
    elif file_settings.get("output") is not None:
        output = _resolve_path(
            base_path, _require_non_empty_string(file_settings["output"], "output")
        )
    else:
        output = Path(DEFAULT_OUTPUT_PATH)

    policy_value = on_collision if on_collision is not None else file_settings.get("on_collision")
    return MergeSettings(
        schema_dir=_canonicalize_directory(source, label),
        output_path=output,
        naming=_parse_naming_section(file_settings.get("naming")),
        on_collision=_parse_collision_policy(policy_value),
    )


def _read_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Failed to read configuration file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")
    return parsed


def _canonicalize_directory(path: Path, label: str) -> Path:
    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ConfigurationError(f"Invalid path {label}: {path}") from exc
    if not resolved.is_dir():
        raise ConfigurationError(f"Invalid path {label}: {resolved} is not a directory")
    return resolved


def _parse_naming_section(value: Any) -> NamingPattern:
    if value is None:
        return DEFAULT_NAMING_PATTERN
    if not isinstance(value, Mapping):
        raise ConfigurationError("naming must be a mapping.")
    unknown = set(value) - {"prefix", "suffix", "type_suffix", "separator"}
    if unknown:
        raise ConfigurationError(f"Unknown naming keys: {', '.join(sorted(map(str, unknown)))}")
    return NamingPattern(
        prefix=_optional_string(
            value.get("prefix"), "naming.prefix", DEFAULT_NAMING_PATTERN.prefix
        ),
        suffix=_require_non_empty_string(
            value.get("suffix", DEFAULT_NAMING_PATTERN.suffix), "naming.suffix"
        ),
        type_suffix=_optional_string(
            value.get("type_suffix"), "naming.type_suffix", DEFAULT_NAMING_PATTERN.type_suffix
        ),
        separator=_require_non_empty_string(
            value.get("separator", DEFAULT_NAMING_PATTERN.separator), "naming.separator"
        ),
    )


def _parse_collision_policy(value: Any) -> CollisionPolicy:
    if value is None:
        return CollisionPolicy.OVERWRITE
    if not isinstance(value, str):
        raise ConfigurationError("on_collision must be a string.")
    try:
        return CollisionPolicy(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in CollisionPolicy)
        raise ConfigurationError(f"on_collision must be one of: {choices}.") from exc


def _resolve_path(base_path: Path, value: str) -> Path:
    candidate = Path(value).expanduser()
    if candidate.is_absolute():
        return candidate
    return base_path / candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{field_name} must be a non-empty string.")
    return value.strip()


def _optional_string(value: Any, field_name: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value
