"""Composition root for ``lib_typed_config``.

Purpose
-------
Provide the entry points that orchestrate file reading, format detection,
typed parsing, and validation. The module wires the filesystem adapter and
the config adapter together and exports only stable, consumer-ready APIs.

Contents
--------
* :func:`load_config` – read, detect, parse, and validate one file.
* :func:`parse_config` – parse and validate text already in memory.
* :func:`detect_format` – the format resolution step on its own.

System Role
-----------
Every call is independent: the functions keep no state between invocations
and perform a single file read at most. Failures surface as
:class:`~lib_typed_config.domain.errors.ConfigError` with the most specific
``kind`` available.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from .adapters.file_loaders.text import TextFileReader
from .application.config import ConfigAdapter, config_adapter
from .application.ports import TextReader
from .domain.errors import ConfigError, ErrorKind
from .domain.formats import ConfigFormat
from .observability import bind_trace_id, log_debug, log_error, log_info, make_event

T = TypeVar("T")

_READER = TextFileReader()


def load_config(
    path: str | Path,
    schema: type[T] | ConfigAdapter[T],
    *,
    format_hint: ConfigFormat | str | None = None,
    reader: TextReader | None = None,
) -> T:
    """Load the configuration file at *path* as a validated *schema* instance.

    Why
    ----
    Centralise the ``load -> parse -> validate`` sequence so applications
    do not reinvent format detection and error wrapping.

    What
    ----
    Reads the file, resolves the format (*format_hint* wins over the file
    extension), deserialises the text, and validates the result.

    Parameters
    ----------
    path:
        Configuration file to read as UTF-8.
    schema:
        Configuration type, or a :class:`ConfigAdapter` carrying a custom
        validator.
    format_hint:
        Explicit format overriding extension inference, e.g. to read a
        ``.conf`` file as TOML.
    reader:
        Alternative :class:`~lib_typed_config.application.ports.TextReader`.

    Returns
    -------
    T
        The validated configuration instance.

    Raises
    ------
    ConfigError
        ``IOError`` when the file cannot be read, ``FormatError`` when no
        format applies, ``TOML parse error``/``JSON parse error`` for
        malformed content, and whatever the validator raised otherwise.

    Side Effects
    ------------
    Clears the active trace identifier and emits structured log events.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> from tempfile import TemporaryDirectory
    >>> @dataclass
    ... class Limits:
    ...     timeout: int
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "limits.toml"
    >>> _ = target.write_text("timeout = 30", encoding="utf-8")
    >>> load_config(target, Limits)
    Limits(timeout=30)
    >>> tmp.cleanup()
    """

    adapter = _as_adapter(schema)
    bind_trace_id(None)
    text = (reader or _READER).read(path)
    try:
        fmt = detect_format(path, format_hint)
    except ConfigError as exc:
        raise exc.with_context(str(path)) from exc.cause
    if fmt is None:
        log_error("config_format_unknown", **make_event(None, str(path)))
        raise ConfigError(
            "Unknown configuration format",
            kind=ErrorKind.FORMAT,
            context=str(path),
        )
    try:
        instance = adapter.from_text(text, fmt)
    except ConfigError as exc:
        if exc.context is not None:
            raise
        raise exc.with_context(str(path)) from exc.cause
    result = _validated(adapter, instance, fmt, str(path))
    log_info("configuration_loaded", **make_event(fmt.value, str(path), {"schema": adapter.schema_name}))
    return result


def parse_config(
    text: str,
    schema: type[T] | ConfigAdapter[T],
    *,
    fmt: ConfigFormat | str,
) -> T:
    """Parse and validate configuration *text* that is already in memory.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Limits:
    ...     timeout: int
    >>> parse_config('{"timeout": 5}', Limits, fmt="json")
    Limits(timeout=5)
    """

    adapter = _as_adapter(schema)
    resolved = ConfigFormat.parse(fmt)
    instance = adapter.from_text(text, resolved)
    return _validated(adapter, instance, resolved, None)


def detect_format(path: str | Path, format_hint: ConfigFormat | str | None = None) -> ConfigFormat | None:
    """Return the effective format for *path*.

    An explicit *format_hint* always wins; otherwise the extension decides.

    Examples
    --------
    >>> detect_format("service.json", "toml")
    <ConfigFormat.TOML: 'toml'>
    >>> detect_format("service.Json")
    <ConfigFormat.JSON: 'json'>
    >>> detect_format("service.conf") is None
    True
    """

    if format_hint is not None:
        return ConfigFormat.parse(format_hint)
    return ConfigFormat.from_path(path)


def _validated(adapter: ConfigAdapter[T], instance: T, fmt: ConfigFormat, path: str | None) -> T:
    try:
        return adapter.validate_and_build(instance)
    except ConfigError as exc:
        log_debug(
            "configuration_invalid",
            **make_event(fmt.value, path, {"schema": adapter.schema_name, "error": str(exc)}),
        )
        raise


def _as_adapter(schema: type[T] | ConfigAdapter[T]) -> ConfigAdapter[T]:
    if isinstance(schema, ConfigAdapter):
        return schema
    return config_adapter(schema)


__all__ = [
    "load_config",
    "parse_config",
    "detect_format",
]
