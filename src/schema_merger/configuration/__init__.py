"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SCHEMA_DIR,
    SCHEMA_DIR_ENV_VAR,
    ConfigurationError,
    load_settings,
)
from .runtime_settings import MergeSettings

__all__ = [
    "MergeSettings",
    "ConfigurationError",
    "load_settings",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_SCHEMA_DIR",
    "SCHEMA_DIR_ENV_VAR",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
