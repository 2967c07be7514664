"""Recognised configuration text encodings.

Purpose
-------
Describe the closed set of formats the library can decode and the rules used
to infer one from a file name.

Contents
--------
* :class:`ConfigFormat` – ``TOML`` and ``JSON`` plus inference helpers.

System Role
-----------
The loader asks :meth:`ConfigFormat.from_path` for a format when the caller
did not supply a hint. ``None`` means "no format could be determined", which
the loader reports as a ``FormatError`` without attempting to parse.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .errors import ConfigError, ErrorKind


class ConfigFormat(str, Enum):
    """Textual encodings understood by the loader."""

    TOML = "toml"
    JSON = "json"

    @classmethod
    def from_extension(cls, extension: str) -> ConfigFormat | None:
        """Map a file extension to a format, case-insensitively.

        A single leading dot is ignored so ``Path.suffix`` values can be
        passed directly.

        Examples
        --------
        >>> ConfigFormat.from_extension("TOML")
        <ConfigFormat.TOML: 'toml'>
        >>> ConfigFormat.from_extension(".Json")
        <ConfigFormat.JSON: 'json'>
        >>> ConfigFormat.from_extension("yaml") is None
        True
        """

        normalised = extension.lower()
        if normalised.startswith("."):
            normalised = normalised[1:]
        return _EXTENSIONS.get(normalised)

    @classmethod
    def from_path(cls, path: str | Path) -> ConfigFormat | None:
        """Infer the format from the suffix of *path*.

        Examples
        --------
        >>> ConfigFormat.from_path("/etc/demo/config.TOML")
        <ConfigFormat.TOML: 'toml'>
        >>> ConfigFormat.from_path("settings") is None
        True
        """

        suffix = Path(path).suffix
        if not suffix:
            return None
        return cls.from_extension(suffix)

    @classmethod
    def parse(cls, value: ConfigFormat | str) -> ConfigFormat:
        """Coerce a caller-supplied hint into a member.

        Raises
        ------
        ConfigError
            ``FormatError`` when *value* names no supported format.

        Examples
        --------
        >>> ConfigFormat.parse("JSON")
        <ConfigFormat.JSON: 'json'>
        """

        if isinstance(value, ConfigFormat):
            return value
        resolved = cls.from_extension(value)
        if resolved is None:
            raise ConfigError(
                f"Unsupported configuration format {value!r}; expected one of: toml, json",
                kind=ErrorKind.FORMAT,
            )
        return resolved

    @property
    def label(self) -> str:
        """Upper-case display name (``"TOML"`` / ``"JSON"``)."""

        return self.name


_EXTENSIONS: dict[str, ConfigFormat] = {member.value: member for member in ConfigFormat}


__all__ = ["ConfigFormat"]
