"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the loader relies on so it can orchestrate
reading, decoding, and validation without depending on concrete adapters.

Contents
--------
* :class:`TextReader` – reads one configuration file as text.
* :class:`Codec` – converts between text and JSON-compatible Python data.
* :class:`Validator` – callable checking a deserialised instance.

System Role
-----------
These protocols keep the dependency rule intact: adapters implement them, the
composition root in :mod:`lib_typed_config.core` consumes them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TextReader(Protocol):
    """Read a single configuration artifact.

    Why
    ----
    Isolate filesystem access so I/O failures are wrapped in one place.
    """

    def read(self, path: str | Path) -> str:
        """Return the UTF-8 contents of *path* or raise an ``IOError``-kind ``ConfigError``."""


@runtime_checkable
class Codec(Protocol):
    """Translate one textual encoding to Python data and back.

    Why
    ----
    Segregate parser and writer libraries (``tomllib``, ``tomli_w``, ``json``)
    from the typed construction performed by the config adapter.
    """

    def decode(self, text: str) -> Any:
        """Parse *text* or raise the format's parse-error ``ConfigError``."""

    def encode(self, data: Any) -> str:
        """Render *data* as pretty-printed text or raise a ``SerialisationError``."""


class Validator(Protocol):
    """Check the invariants of a freshly deserialised instance.

    Why
    ----
    Let callers substitute the default :func:`~lib_typed_config.domain.validate.run_validation`
    without subclassing their configuration type.
    """

    def __call__(self, instance: Any, /) -> None:
        """Return ``None`` when *instance* is valid, raise ``ConfigError`` otherwise."""
