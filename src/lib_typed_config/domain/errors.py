"""Domain-level error model.

Purpose
-------
Expose the single exception type shared by adapters, the loader, the example
printer, and consuming applications. The type lives in the domain layer so
every outer layer may depend on it without creating cycles.

Contents
--------
* :class:`ErrorKind` – the closed set of ``kind`` tags used by the library.
* :class:`ConfigError` – message plus optional kind, context, and cause.

System Role
-----------
Each failure is wrapped exactly once where it happens. Intermediate callers
enrich the error through the ``with_*`` builders, which return new instances
so no layer loses information attached by an earlier one. Callers catch
:class:`ConfigError` and branch on :attr:`ConfigError.kind` when they need
differentiated handling.
"""

from __future__ import annotations

from typing import Final


class ErrorKind:
    """Category tags carried by :attr:`ConfigError.kind`.

    The values double as the human-readable labels rendered by
    :meth:`ConfigError.__str__`.
    """

    IO: Final[str] = "IOError"
    TOML_PARSE: Final[str] = "TOML parse error"
    JSON_PARSE: Final[str] = "JSON parse error"
    FORMAT: Final[str] = "FormatError"
    VALIDATION: Final[str] = "ValidationError"
    SERIALISATION: Final[str] = "SerialisationError"


class ConfigError(Exception):
    """Failure raised while loading, validating, or serialising configuration.

    Why
    ----
    Provide one catch-all type whose fields keep the diagnostic trail intact:
    what went wrong (``message``), which class of failure it was (``kind``),
    where it happened (``context``), and the lower-level error that triggered
    it (``cause``).

    What
    ----
    Instances are immutable once constructed. The builders
    :meth:`with_kind`, :meth:`with_context`, and :meth:`with_cause` return
    enriched copies. ``cause`` is mirrored in ``__cause__`` so standard
    traceback rendering shows the chain.

    Examples
    --------
    >>> err = ConfigError("Failed to read config file").with_kind(ErrorKind.IO).with_context("/etc/app.toml")
    >>> str(err)
    'Configuration error [IOError] in /etc/app.toml: Failed to read config file'
    >>> str(ConfigError("port out of range"))
    'Configuration error: port out of range'
    >>> ConfigError("")
    Traceback (most recent call last):
    ...
    ValueError: ConfigError requires a non-empty message
    """

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        context: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if not message or not message.strip():
            raise ValueError("ConfigError requires a non-empty message")
        super().__init__(message)
        self._message = message
        self._kind = kind
        self._context = context
        self.__cause__ = cause

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""

        return self._message

    @property
    def kind(self) -> str | None:
        """Category tag, usually one of the :class:`ErrorKind` values."""

        return self._kind

    @property
    def context(self) -> str | None:
        """Auxiliary detail such as the file path or offending field."""

        return self._context

    @property
    def cause(self) -> BaseException | None:
        """Underlying error that triggered this one, if any.

        Reads ``__cause__`` so ``raise err from exc`` is reflected as well.
        """

        return self.__cause__

    def with_kind(self, kind: str) -> ConfigError:
        """Return a copy tagged with *kind*."""

        return self._replace(kind=kind)

    def with_context(self, context: str) -> ConfigError:
        """Return a copy carrying *context* (for example ``"field: port"``)."""

        return self._replace(context=context)

    def with_cause(self, cause: BaseException) -> ConfigError:
        """Return a copy chained to *cause*.

        Examples
        --------
        >>> root = FileNotFoundError("missing")
        >>> ConfigError("Failed to read config file").with_cause(root).cause is root
        True
        """

        return self._replace(cause=cause)

    def is_kind(self, kind: str) -> bool:
        """Return ``True`` when the error is tagged with *kind*.

        Examples
        --------
        >>> ConfigError("bad", kind=ErrorKind.FORMAT).is_kind("FormatError")
        True
        """

        return self._kind == kind

    def _replace(self, **changes: object) -> ConfigError:
        fields: dict[str, object] = {
            "kind": self._kind,
            "context": self._context,
            "cause": self.__cause__,
        }
        fields.update(changes)
        return type(self)(self._message, **fields)  # type: ignore[arg-type]

    def __str__(self) -> str:
        rendered = "Configuration error"
        if self._kind is not None:
            rendered += f" [{self._kind}]"
        if self._context is not None:
            rendered += f" in {self._context}"
        return f"{rendered}: {self._message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, kind={self._kind!r}, "
            f"context={self._context!r}, cause={self.__cause__!r})"
        )


__all__ = ["ConfigError", "ErrorKind"]
