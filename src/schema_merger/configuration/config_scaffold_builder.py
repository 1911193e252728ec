"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-merger.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-merger.
# Every key is optional; remove the ones you do not need.
# Relative paths are resolved against the directory of this file.

# Directory holding the schema files to merge.
# The SM_JSON_DATA_SCHEMA_DIR environment variable and --schema-dir take precedence.
schema_dir: "sm-json-data/schema"

# Destination of the merged draft-07 schema document.
output: "generated/m3-total.schema.json"

naming:
  # Only files named <prefix><base><suffix> are merged; others are skipped.
  prefix: "m3-"
  suffix: ".schema.json"
  # "room-state" becomes "RoomState" + type_suffix.
  type_suffix: "Schema"
  separator: "-"

# What to do when two definitions share a name: overwrite (last wins) or error.
on_collision: "overwrite"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with the default values and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
