"""Validation capability for configuration structures.

Purpose
-------
Give application-defined configuration types a single hook for domain rules
that the type system cannot express: range checks, fields that must appear
together, cross-field consistency.

Contents
--------
* :class:`Validate` – base class whose :meth:`Validate.validate` succeeds by
  default and may be overridden.
* :func:`validation_error` – builds a :class:`ConfigError` tagged
  ``ValidationError`` with the offending field as context.
* :func:`run_validation` – the default validator used by the loader.

System Role
-----------
Validation runs after deserialisation and before a configuration instance is
handed back to the caller. It is a pure check and never mutates the instance.
"""

from __future__ import annotations

from typing import Any, Callable

from .errors import ConfigError, ErrorKind


class Validate:
    """Mixin granting the ``validate`` hook.

    Why
    ----
    Absence of an override means the type has no invariants beyond what its
    field types already enforce, so the default implementation accepts every
    instance.

    Examples
    --------
    >>> class Timeouts(Validate):
    ...     def __init__(self, seconds: int) -> None:
    ...         self.seconds = seconds
    ...     def validate(self) -> None:
    ...         if self.seconds < 0:
    ...             raise validation_error("timeout must not be negative", field="seconds")
    >>> Timeouts(5).validate()
    >>> Timeouts(-1).validate()
    Traceback (most recent call last):
    ...
    lib_typed_config.domain.errors.ConfigError: Configuration error [ValidationError] in seconds: timeout must not be negative
    """

    def validate(self) -> None:
        """Check the instance invariants, raising :class:`ConfigError` on violation."""

        return None


def validation_error(message: str, *, field: str | None = None) -> ConfigError:
    """Return a ``ValidationError``-tagged :class:`ConfigError` naming *field*.

    Examples
    --------
    >>> err = validation_error("port must be between 1 and 65535", field="port")
    >>> (err.kind, err.context)
    ('ValidationError', 'port')
    """

    return ConfigError(message, kind=ErrorKind.VALIDATION, context=field)


def run_validation(instance: object) -> None:
    """Default validator: run the ``validate`` hook of :class:`Validate` types.

    Other objects pass unchecked. Errors raised by the hook propagate as-is.
    The hook is looked up among :class:`Validate` subclasses only, so an
    unrelated ``validate`` earlier in the MRO (pydantic's deprecated
    ``BaseModel.validate`` classmethod, say) is never called.
    """

    if isinstance(instance, Validate):
        _validate_hook(type(instance))(instance)


def _validate_hook(cls: type) -> Callable[[Any], None]:
    for klass in cls.__mro__:
        if issubclass(klass, Validate) and "validate" in vars(klass):
            return vars(klass)["validate"]
    return Validate.validate


__all__ = ["Validate", "validation_error", "run_validation"]
