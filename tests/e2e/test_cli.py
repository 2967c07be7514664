"""End-to-end CLI coverage for the commands exposed by lib_typed_config.

The commands run against the bundled ``ServiceConfig`` demo schema so the
tests double as regression checks for the README examples.
"""

from __future__ import annotations

import json
from pathlib import Path

import lib_cli_exit_tools
from click.testing import CliRunner

from lib_typed_config import ConfigError, ErrorKind, cli

SCHEMA = "lib_typed_config.examples.sample:ServiceConfig"


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def test_cli_check_prints_validated_json(tmp_path: Path) -> None:
    source = tmp_path / "service.toml"
    source.write_text('host = "example.org"\nport = 9000\n', encoding="utf-8")
    result = _runner().invoke(cli.cli, ["check", str(source), "--schema", SCHEMA])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload == {"host": "example.org", "port": 9000, "timeout": 30, "tags": []}


def test_cli_check_format_override(tmp_path: Path) -> None:
    source = tmp_path / "service.conf"
    source.write_text("timeout = 5\n", encoding="utf-8")
    result = _runner().invoke(cli.cli, ["check", str(source), "--schema", SCHEMA, "--format", "TOML"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["timeout"] == 5


def test_cli_check_reports_validation_error(tmp_path: Path) -> None:
    source = tmp_path / "service.json"
    source.write_text('{"timeout": -1}', encoding="utf-8")
    result = _runner().invoke(cli.cli, ["check", str(source), "--schema", SCHEMA])
    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigError)
    assert result.exception.kind == ErrorKind.VALIDATION


def test_cli_check_rejects_bad_schema_reference(tmp_path: Path) -> None:
    source = tmp_path / "service.toml"
    source.write_text("timeout = 5\n", encoding="utf-8")
    for reference in ("no_colon", "lib_typed_config.examples.sample:Missing", "not_a_module_xyz:Thing"):
        result = _runner().invoke(cli.cli, ["check", str(source), "--schema", reference])
        assert result.exit_code == 2
        assert "--schema" in result.output


def test_cli_example_prints_both_blocks() -> None:
    result = _runner().invoke(cli.cli, ["example", "--schema", SCHEMA])
    assert result.exit_code == 0
    assert result.output.startswith("JSON example:")
    assert '"port": 8080' in result.output
    assert "TOML example:" in result.output
    assert "port = 8080" in result.output


def test_cli_example_single_format() -> None:
    result = _runner().invoke(cli.cli, ["example", "--schema", SCHEMA, "--format", "json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["port"] == 8080
    assert "TOML example:" not in result.output


def test_cli_generate_examples_command(tmp_path: Path) -> None:
    destination = tmp_path / "examples"
    command = ["generate-examples", "--schema", SCHEMA, "--destination", str(destination)]
    runner = _runner()
    first = runner.invoke(cli.cli, command)
    assert first.exit_code == 0, first.output
    created = [Path(item) for item in json.loads(first.output)]
    assert {path.name for path in created} == {"config.example.json", "config.example.toml"}

    second = runner.invoke(cli.cli, command)
    assert json.loads(second.output) == []

    forced = runner.invoke(cli.cli, command + ["--force"])
    assert len(json.loads(forced.output)) == 2


def test_main_returns_exit_code_for_config_errors(tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    exit_code = cli.main(["check", str(missing), "--schema", SCHEMA])
    assert exit_code != 0


def test_main_restores_traceback_flag() -> None:
    previous = lib_cli_exit_tools.config.traceback
    assert cli.main(["--traceback", "info"]) == 0
    assert lib_cli_exit_tools.config.traceback == previous


def test_cli_version_option() -> None:
    result = _runner().invoke(cli.cli, ["--version"])
    assert result.exit_code == 0
    assert "lib_typed_config version" in result.output


def test_cli_info_handles_missing_metadata(monkeypatch) -> None:
    """`cli info` must degrade gracefully when package metadata is unavailable."""

    def _raise_pkg_not_found(*_args, **_kwargs):
        raise cli.metadata.PackageNotFoundError()

    monkeypatch.setattr(cli.metadata, "metadata", _raise_pkg_not_found)
    result = _runner().invoke(cli.cli, ["info"])
    assert result.exit_code == 0
    assert "metadata unavailable" in result.output
