"""Filesystem adapter reading one configuration file as text.

Purpose
-------
Keep the loader free of filesystem details: existence checks, decoding, and
the wrapping of operating-system failures happen here and nowhere else.

Contents
--------
* :class:`TextFileReader` – reads a file as UTF-8 text.

System Role
-----------
Invoked by :func:`lib_typed_config.core.load_config` as the first step of the
pipeline. A failure here stops the pipeline before any format is inferred.
"""

from __future__ import annotations

from pathlib import Path

from ...domain.errors import ConfigError, ErrorKind
from ...observability import log_debug, log_error


class TextFileReader:
    """Read configuration files from the local filesystem."""

    encoding = "utf-8"

    def read(self, path: str | Path) -> str:
        """Return the contents of *path* decoded as UTF-8.

        Why
        ----
        Missing files, directories, permission problems, and undecodable
        bytes are all reported the same way so callers can retry or bail out
        on a single ``IOError`` kind.

        Raises
        ------
        ConfigError
            ``IOError`` with the path as context and the original exception
            as cause.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', suffix='.toml', delete=False, encoding='utf-8')
        >>> _ = tmp.write('timeout = 30')
        >>> tmp.close()
        >>> TextFileReader().read(tmp.name)
        'timeout = 30'
        >>> Path(tmp.name).unlink()
        """

        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            log_error("config_file_unreadable", path=str(file_path), error=str(exc))
            raise ConfigError(
                "Failed to read config file",
                kind=ErrorKind.IO,
                context=str(file_path),
            ) from exc
        log_debug("config_file_read", path=str(file_path), size=len(text))
        return text


__all__ = ["TextFileReader"]
