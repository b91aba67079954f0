"""CLI orchestration integration tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner
from ecs_fieldgen.cli import _CliLogHandler, cli, main


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _samples() -> tuple[Path, Path]:
    samples = _project_root() / "samples"
    return samples / "schema", samples / "ecs.go.j2"


def test_generate_command_prints_code_to_stdout() -> None:
    schema_dir, template = _samples()
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["generate", "--version", "8.11.0", "--template", str(template), str(schema_dir)],
    )

    assert result.exit_code == 0, result.output
    assert "package ecs" in result.output
    assert 'const Version = "8.11.0"' in result.output
    assert "EphemeralID string" in result.output
    assert "type HostOS struct {" in result.output
    assert "OS HostOS `ecs:\"os\"`" in result.output
    assert "Timestamp time.Time" in result.output
    assert "// Process id." in result.output


def test_generate_command_writes_output_file_with_exclusions(tmp_path: Path) -> None:
    schema_dir, template = _samples()
    output_path = tmp_path / "ecs.go"
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "--version",
            "8.11.0",
            "--template",
            str(template),
            "--pkg",
            "fields",
            "--out",
            str(output_path),
            "-e",
            "process.pid",
            "-e",
            "tags",
            str(schema_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert str(output_path.resolve()) in result.output
    contents = output_path.read_text(encoding="utf-8")
    assert "package fields" in contents
    assert "PID int" not in contents
    assert "Tags string" not in contents
    assert "Name string" in contents


def test_generate_command_uses_configuration_file(tmp_path: Path) -> None:
    schema_dir, template = _samples()
    config_path = tmp_path / "fieldgen.yaml"
    config_path.write_text(
        f"""
version: "7.0.0"
template: "{template}"
package: events
output: generated/ecs.go
schemas:
  - "{schema_dir}"
exclude: [labels]
""",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    contents = (tmp_path / "generated" / "ecs.go").read_text(encoding="utf-8")
    assert "package events" in contents
    assert 'const Version = "7.0.0"' in contents
    assert "Labels map[string]interface{}" not in contents


def test_generate_command_returns_error_for_missing_template(tmp_path: Path) -> None:
    schema_dir, _ = _samples()
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "--version",
            "1.0",
            "--template",
            str(tmp_path / "missing.j2"),
            str(schema_dir),
        ],
    )

    assert result.exit_code != 0
    assert "missing.j2" in str(result.exception)


def test_list_fields_command_prints_sorted_fields() -> None:
    schema_dir, _ = _samples()
    runner = CliRunner()

    result = runner.invoke(
        cli, ["list-fields", "--version", "1.0", "-e", "host.uptime", str(schema_dir)]
    )

    assert result.exit_code == 0, result.output
    lines = result.output.strip().split("\n")
    assert lines == sorted(lines)
    assert "process.pid\tint" in lines
    assert "@timestamp\ttime.Time" in lines
    assert "host.os.family\tstring" in lines
    assert not any(line.startswith("host.uptime\t") for line in lines)


def test_generate_config_command_writes_placeholder_file_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("fieldgen.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "version:" in content
        assert "schemas:" in content
        assert "<REQUIRED>" in content
        assert str(output_path) in result.output


def test_generate_config_command_fails_when_output_file_already_exists(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "fieldgen.yaml"
    output_path.write_text("already-there", encoding="utf-8")

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code != 0
    assert "already exists" in str(result.exception).lower()
    assert output_path.read_text(encoding="utf-8") == "already-there"


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("ecs_fieldgen")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_verbose_flag_logs_assembly_summary(restore_package_logger, caplog) -> None:
    schema_dir, _ = _samples()
    runner = CliRunner()

    result = runner.invoke(cli, ["--verbose", "list-fields", "--version", "1.0", str(schema_dir)])

    assert result.exit_code == 0
    assert "process.pid\tint" in result.output
    assert "Assembled schema 1.0" in caplog.text


def test_repeated_verbose_runs_keep_a_single_log_handler(restore_package_logger) -> None:
    schema_dir, _ = _samples()
    logger = logging.getLogger("ecs_fieldgen")
    handlers_before = len(logger.handlers)

    for _ in range(2):
        assert main(["--verbose", "list-fields", "--version", "1.0", str(schema_dir)]) == 0

    assert len(logger.handlers) == handlers_before + 1
    assert sum(isinstance(handler, _CliLogHandler) for handler in logger.handlers) == 1
