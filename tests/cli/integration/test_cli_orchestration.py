"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from schema_merger.cli import cli


def _write_corpus(schema_dir: Path) -> None:
    schema_dir.mkdir(parents=True)
    (schema_dir / "m3-a.schema.json").write_text(
        json.dumps({"type": "object", "definitions": {"X": {"type": "string"}}}),
        encoding="utf-8",
    )
    (schema_dir / "m3-b.schema.json").write_text(
        json.dumps({"$ref": "m3-a.schema.json"}), encoding="utf-8"
    )


def test_merge_command_writes_total_schema(tmp_path: Path) -> None:
    schema_dir = tmp_path / "schema"
    _write_corpus(schema_dir)
    output_path = tmp_path / "generated" / "m3-total.schema.json"
    runner = CliRunner()

    result = runner.invoke(
        cli, ["merge", "--schema-dir", str(schema_dir), "--output", str(output_path)]
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(output_path.resolve())
    assert json.loads(output_path.read_text(encoding="utf-8")) == {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "definitions": {
            "ASchema": {"type": "object"},
            "BSchema": {"$ref": "#/definitions/ASchema"},
            "X": {"type": "string"},
        },
    }


def test_merge_command_uses_environment_and_default_output(tmp_path: Path) -> None:
    schema_dir = tmp_path / "schema"
    _write_corpus(schema_dir)
    runner = CliRunner()

    with runner.isolated_filesystem(temp_dir=tmp_path) as workdir:
        result = runner.invoke(cli, ["merge"], env={"SM_JSON_DATA_SCHEMA_DIR": str(schema_dir)})
        output_path = Path(workdir) / "generated" / "m3-total.schema.json"

        assert result.exit_code == 0, result.output
        assert set(json.loads(output_path.read_text(encoding="utf-8"))["definitions"]) == {
            "ASchema",
            "BSchema",
            "X",
        }


def test_merge_command_reads_config_file(tmp_path: Path) -> None:
    schema_dir = tmp_path / "schema"
    _write_corpus(schema_dir)
    (schema_dir / "m3-c.schema.json").write_text(
        json.dumps({"definitions": {"X": {"type": "integer"}}}), encoding="utf-8"
    )
    config_path = tmp_path / "schema-merger.yaml"
    config_path.write_text("schema_dir: schema\non_collision: error\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["merge", "--config", str(config_path), "--output", str(tmp_path / "out.json")],
        env={"SM_JSON_DATA_SCHEMA_DIR": None},
    )

    assert result.exit_code != 0
    assert not (tmp_path / "out.json").exists()


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-merger.yaml"
    runner = CliRunner()

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert result.output.strip() == str(output_path.resolve())
    assert "on_collision" in output_path.read_text(encoding="utf-8")
