"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_merger.configuration import (
    DEFAULT_CONFIG_FILENAME,
    SCHEMA_DIR_ENV_VAR,
    write_placeholder_configuration,
)
from schema_merger.merge_execution import MergeExecutionError, MergeRequest, execute_schema_merge
from schema_merger.schema_transforms import CollisionPolicy


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="sm-schema-merger")
def cli() -> None:
    """Merge JSON Schema files into one schema for type generation."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the default settings and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="merge")
@click.option(
    "--schema-dir",
    "schema_dir",
    required=False,
    type=click.Path(path_type=str),
    help=f"Directory of schema files; overrides {SCHEMA_DIR_ENV_VAR}",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the merged schema document to write",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML configuration file",
)
@click.option(
    "--on-collision",
    "on_collision",
    required=False,
    type=click.Choice([policy.value for policy in CollisionPolicy]),
    help="Behaviour when two definitions share a name (default: overwrite)",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def merge(
    schema_dir: str | None,
    output_path: str | None,
    config_path: str | None,
    on_collision: str | None,
    verbose: bool,
) -> None:
    """Merge the schema directory into a single draft-07 schema document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        outcome = execute_schema_merge(
            MergeRequest(
                config_path=config_path,
                schema_dir=schema_dir,
                output_path=output_path,
                on_collision=on_collision,
            )
        )
    except MergeExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
