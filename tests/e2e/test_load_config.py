"""End-to-end coverage of ``load_config`` and ``parse_config``.

Each test writes a real file and drives the whole read -> detect -> parse ->
validate pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pytest

from lib_typed_config import (
    Config,
    ConfigAdapter,
    ConfigError,
    ConfigFormat,
    ErrorKind,
    detect_format,
    load_config,
    parse_config,
    validation_error,
)
from lib_typed_config.examples.sample import ServiceConfig


@dataclass
class Timeout:
    timeout: int


@dataclass
class GuardedTimeout(Config):
    timeout: int

    def validate(self) -> None:
        if self.timeout < 0:
            raise validation_error("timeout must not be negative", field="timeout")


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_toml_without_validate_override(tmp_path: Path) -> None:
    path = write(tmp_path / "app.toml", "timeout = 30\n")
    assert load_config(path, Timeout) == Timeout(timeout=30)


def test_json_rejected_by_validate(tmp_path: Path) -> None:
    path = write(tmp_path / "app.json", '{"timeout": -1}')
    with pytest.raises(ConfigError) as caught:
        load_config(path, GuardedTimeout)
    assert caught.value.kind == ErrorKind.VALIDATION
    assert caught.value.context == "timeout"


def test_validation_error_passes_through_unmodified(tmp_path: Path) -> None:
    failure = validation_error("rejected", field="timeout")

    def reject(instance: object) -> None:
        raise failure

    path = write(tmp_path / "app.toml", "timeout = 1\n")
    with pytest.raises(ConfigError) as caught:
        load_config(path, ConfigAdapter(Timeout, validator=reject))
    assert caught.value is failure


@pytest.mark.parametrize("name", ["app.TOML", "app.Toml", "app.toml"])
def test_extension_matching_is_case_insensitive(tmp_path: Path, name: str) -> None:
    path = write(tmp_path / name, "timeout = 5\n")
    assert load_config(path, Timeout).timeout == 5


def test_hint_overrides_extension(tmp_path: Path) -> None:
    path = write(tmp_path / "x.json", "timeout = 7\n")
    assert load_config(path, Timeout, format_hint=ConfigFormat.TOML) == Timeout(timeout=7)
    with pytest.raises(ConfigError) as caught:
        load_config(path, Timeout)
    assert caught.value.kind == ErrorKind.JSON_PARSE


def test_hint_attempts_toml_parse_on_json_file(tmp_path: Path) -> None:
    path = write(tmp_path / "x.json", '{"timeout": 7}')
    with pytest.raises(ConfigError) as caught:
        load_config(path, Timeout, format_hint="toml")
    assert caught.value.kind == ErrorKind.TOML_PARSE


def test_hint_reads_unknown_extension(tmp_path: Path) -> None:
    path = write(tmp_path / "service.conf", "timeout = 9\n")
    assert load_config(path, Timeout, format_hint="toml").timeout == 9


def test_missing_file_is_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yaml"
    with pytest.raises(ConfigError) as caught:
        load_config(missing, Timeout)
    error = caught.value
    assert error.kind == ErrorKind.IO
    assert error.context == str(missing)
    assert isinstance(error.cause, FileNotFoundError)


def test_unknown_extension_is_format_error(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_typed_config")
    path = write(tmp_path / "service.conf", "timeout = 9\n")
    with pytest.raises(ConfigError) as caught:
        load_config(path, Timeout)
    error = caught.value
    assert error.kind == ErrorKind.FORMAT
    assert error.context == str(path)
    assert error.cause is None
    messages = [record.getMessage() for record in caplog.records]
    assert "config_format_unknown" in messages
    assert "config_text_decoded" not in messages


def test_missing_extension_is_format_error(tmp_path: Path) -> None:
    path = write(tmp_path / "service", "timeout = 9\n")
    with pytest.raises(ConfigError) as caught:
        load_config(path, Timeout)
    assert caught.value.kind == ErrorKind.FORMAT


def test_unsupported_hint_is_format_error(tmp_path: Path) -> None:
    path = write(tmp_path / "service.toml", "timeout = 9\n")
    with pytest.raises(ConfigError) as caught:
        load_config(path, Timeout, format_hint="yaml")
    assert caught.value.kind == ErrorKind.FORMAT
    assert caught.value.context == str(path)


def test_parse_errors_carry_path_context(tmp_path: Path) -> None:
    path = write(tmp_path / "broken.toml", "timeout = \n")
    with pytest.raises(ConfigError) as caught:
        load_config(path, Timeout)
    error = caught.value
    assert error.kind == ErrorKind.TOML_PARSE
    assert error.context == str(path)
    assert error.cause is not None
    assert str(path) in str(error)


def test_type_mismatch_is_parse_error(tmp_path: Path) -> None:
    path = write(tmp_path / "app.json", '{"timeout": "later"}')
    with pytest.raises(ConfigError) as caught:
        load_config(path, Timeout)
    assert caught.value.kind == ErrorKind.JSON_PARSE


def test_sample_service_config(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="lib_typed_config")
    path = write(tmp_path / "service.toml", 'host = "example.org"\nport = 9000\ntags = ["edge"]\n')
    config = load_config(path, ServiceConfig)
    assert config == ServiceConfig(host="example.org", port=9000, timeout=30, tags=["edge"])
    record = caplog.records[-1]
    assert record.getMessage() == "configuration_loaded"
    assert getattr(record, "context")["schema"] == "ServiceConfig"


def test_sample_service_config_rejects_port(tmp_path: Path) -> None:
    path = write(tmp_path / "service.json", '{"port": 70000}')
    with pytest.raises(ConfigError) as caught:
        load_config(path, ServiceConfig)
    assert caught.value.context == "port"


def test_parse_config_from_text() -> None:
    assert parse_config("timeout = 3", Timeout, fmt="toml") == Timeout(timeout=3)
    with pytest.raises(ConfigError) as caught:
        parse_config('{"timeout": -3}', GuardedTimeout, fmt=ConfigFormat.JSON)
    assert caught.value.kind == ErrorKind.VALIDATION


def test_detect_format() -> None:
    assert detect_format("a.json", ConfigFormat.TOML) is ConfigFormat.TOML
    assert detect_format("a.JSON") is ConfigFormat.JSON
    assert detect_format("a.ini") is None
