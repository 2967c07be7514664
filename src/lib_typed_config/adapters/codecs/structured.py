"""Structured text codecs.

Purpose
-------
Convert configuration text into JSON-compatible Python data and back. The
codecs are small wrappers around ``tomllib``/``tomli_w``/``json`` so error
wrapping and observability live in one place.

Contents
--------
* :class:`TOMLCodec` – decodes with ``tomllib`` (``tomli`` before 3.11),
  encodes with ``tomli_w``. TOML has no null, so ``None`` values in tables
  are left out.
* :class:`JSONCodec` – decodes and encodes with :mod:`json`.
* :func:`codec_for` – returns the shared codec of a :class:`ConfigFormat`.

System Role
-----------
Used by :class:`lib_typed_config.application.config.ConfigAdapter` before
typed construction and by the example printer after serialisation.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[no-redef]

import tomli_w

from ...domain.errors import ConfigError, ErrorKind
from ...domain.formats import ConfigFormat
from ...observability import log_debug, log_error


class TOMLCodec:
    """TOML decoding and pretty-printing."""

    format = ConfigFormat.TOML

    def decode(self, text: str) -> dict[str, Any]:
        """Return the table parsed from *text*.

        Examples
        --------
        >>> TOMLCodec().decode('timeout = 30')
        {'timeout': 30}
        """

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            log_error("config_text_invalid", format="toml", error=str(exc))
            raise ConfigError(f"Invalid TOML: {exc}", kind=ErrorKind.TOML_PARSE) from exc
        log_debug("config_text_decoded", format="toml", keys=len(data))
        return data

    def encode(self, data: Any) -> str:
        """Render *data* as TOML; the top level must be a table.

        Examples
        --------
        >>> print(TOMLCodec().encode({"port": 8080}), end="")
        port = 8080
        """

        if not isinstance(data, Mapping):
            log_error("config_text_unserialisable", format="toml", error="top level is not a table")
            raise ConfigError(
                f"TOML documents require a table at the top level, got {type(data).__name__}",
                kind=ErrorKind.SERIALISATION,
            )
        try:
            return tomli_w.dumps(_without_nulls(data))
        except (TypeError, ValueError) as exc:
            log_error("config_text_unserialisable", format="toml", error=str(exc))
            raise ConfigError(f"Failed to serialise TOML: {exc}", kind=ErrorKind.SERIALISATION) from exc


class JSONCodec:
    """JSON decoding and pretty-printing."""

    format = ConfigFormat.JSON

    def decode(self, text: str) -> Any:
        """Return the value parsed from *text*.

        Examples
        --------
        >>> JSONCodec().decode('{"timeout": -1}')
        {'timeout': -1}
        """

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            log_error("config_text_invalid", format="json", error=str(exc))
            raise ConfigError(f"Invalid JSON: {exc}", kind=ErrorKind.JSON_PARSE) from exc
        log_debug("config_text_decoded", format="json")
        return data

    def encode(self, data: Any) -> str:
        """Render *data* as indented JSON.

        Examples
        --------
        >>> print(JSONCodec().encode({"port": 8080}))
        {
          "port": 8080
        }
        """

        try:
            return json.dumps(data, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            log_error("config_text_unserialisable", format="json", error=str(exc))
            raise ConfigError(f"Failed to serialise JSON: {exc}", kind=ErrorKind.SERIALISATION) from exc


def _without_nulls(table: Mapping[str, Any]) -> dict[str, Any]:
    """Return *table* without ``None`` values, recursing into nested tables."""

    return {
        key: _without_nulls(value) if isinstance(value, Mapping) else value
        for key, value in table.items()
        if value is not None
    }


_CODECS: dict[ConfigFormat, TOMLCodec | JSONCodec] = {
    ConfigFormat.TOML: TOMLCodec(),
    ConfigFormat.JSON: JSONCodec(),
}


def codec_for(fmt: ConfigFormat) -> TOMLCodec | JSONCodec:
    """Return the shared codec handling *fmt*."""

    return _CODECS[fmt]


__all__ = ["TOMLCodec", "JSONCodec", "codec_for"]
