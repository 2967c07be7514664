"""Config capability: typed construction from TOML or JSON text.

Purpose
-------
Turn decoded configuration data into an application-defined type and hand
back validated instances. Any type pydantic can deserialise (standard library
dataclasses, ``BaseModel`` subclasses, ``TypedDict`` definitions) gains the
capability through :class:`ConfigAdapter` without inheriting anything.

Contents
--------
* :class:`ConfigAdapter` – generic adapter exposing ``from_toml_text``,
  ``from_json_text`` and ``validate_and_build`` for a schema type.
* :func:`config_adapter` – cached factory returning the shared adapter of a
  schema.
* :class:`Config` – mixin offering the same operations as methods on the
  configuration type itself.

System Role
-----------
The loader in :mod:`lib_typed_config.core` drives these operations after it
has read a file and settled on a format. Parsing and validation stay separate
so callers can inspect an unvalidated instance when they need to.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_json

from ..adapters.codecs.structured import codec_for
from ..domain.errors import ConfigError, ErrorKind
from ..domain.formats import ConfigFormat
from ..domain.validate import Validate, run_validation
from ..observability import log_error
from .ports import Validator

T = TypeVar("T")
C = TypeVar("C", bound="Config")

_PARSE_KINDS: dict[ConfigFormat, str] = {
    ConfigFormat.TOML: ErrorKind.TOML_PARSE,
    ConfigFormat.JSON: ErrorKind.JSON_PARSE,
}


class ConfigAdapter(Generic[T]):
    """Bind a schema type to the parse and validate operations.

    Why
    ----
    Configuration types should not need per-type boilerplate to become
    loadable. Wrapping a ``pydantic.TypeAdapter`` gives every deserialisable
    type the same contract.

    Parameters
    ----------
    schema:
        The application-defined configuration type.
    validator:
        Optional replacement for :func:`~lib_typed_config.domain.validate.run_validation`.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Limits:
    ...     timeout: int
    >>> adapter = ConfigAdapter(Limits)
    >>> adapter.from_toml_text("timeout = 30")
    Limits(timeout=30)
    >>> adapter.from_json_text('{"timeout": "soon"}')
    Traceback (most recent call last):
    ...
    lib_typed_config.domain.errors.ConfigError: Configuration error [JSON parse error]: Invalid JSON for Limits: timeout: Input should be a valid integer
    """

    def __init__(self, schema: type[T], *, validator: Validator | None = None) -> None:
        self._schema = schema
        self._type_adapter: TypeAdapter[T] = TypeAdapter(schema)
        self._validator: Validator = validator if validator is not None else run_validation

    @property
    def schema(self) -> type[T]:
        return self._schema

    @property
    def schema_name(self) -> str:
        return getattr(self._schema, "__name__", repr(self._schema))

    def from_toml_text(self, text: str) -> T:
        """Deserialise TOML *text* without validating it."""

        return self.from_text(text, ConfigFormat.TOML)

    def from_json_text(self, text: str) -> T:
        """Deserialise JSON *text* without validating it."""

        return self.from_text(text, ConfigFormat.JSON)

    def from_text(self, text: str, fmt: ConfigFormat | str) -> T:
        """Decode *text* as *fmt* and build a schema instance.

        Syntax errors and type mismatches raise the same parse-error kind;
        ``cause`` tells them apart. Values are never coerced: ``"30"``, ``30.0``
        and ``true`` are all rejected for an ``int`` field.
        """

        resolved = ConfigFormat.parse(fmt)
        data = codec_for(resolved).decode(text)
        return self._build(data, resolved)

    def validate_and_build(self, instance: T) -> T:
        """Validate *instance* and return it unchanged.

        Errors raised by the validator propagate as they are.
        """

        self._validator(instance)
        return instance

    def default(self) -> T:
        """Return the default instance produced by calling the schema with no arguments."""

        return self._schema()

    def to_python(self, instance: T) -> Any:
        """Return JSON-compatible data for *instance*."""

        try:
            return self._type_adapter.dump_python(instance, mode="json")
        except (TypeError, ValueError) as exc:
            log_error("config_text_unserialisable", schema=self.schema_name, error=str(exc))
            raise ConfigError(
                f"Failed to serialise {self.schema_name}: {exc}",
                kind=ErrorKind.SERIALISATION,
            ) from exc

    def _build(self, data: Any, fmt: ConfigFormat) -> T:
        # Strict JSON mode: objects still populate dataclasses, scalars are never coerced.
        try:
            return self._type_adapter.validate_json(to_json(data), strict=True)
        except PydanticValidationError as exc:
            summary = _summarise(exc)
            log_error("config_text_invalid", format=fmt.value, schema=self.schema_name, error=summary)
            raise ConfigError(
                f"Invalid {fmt.label} for {self.schema_name}: {summary}",
                kind=_PARSE_KINDS[fmt],
            ) from exc

    def __repr__(self) -> str:
        return f"ConfigAdapter({self.schema_name})"


@lru_cache(maxsize=None)
def config_adapter(schema: type[T]) -> ConfigAdapter[T]:
    """Return the shared :class:`ConfigAdapter` of *schema* using the default validator."""

    return ConfigAdapter(schema)


class Config(Validate):
    """Mixin exposing the Config capability on the configuration type.

    Why
    ----
    Applications usually prefer ``AppConfig.from_toml_text(...)`` over
    building an adapter by hand. The ``validate`` hook is found through the
    :class:`Validate` lineage, so the mixin may sit before or after ``BaseModel``
    in the bases; ``Config`` first keeps ``instance.validate()`` pointing at the
    hook as well.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Limits(Config):
    ...     timeout: int = 30
    >>> Limits.from_toml_text("timeout = 5").validate_and_build()
    Limits(timeout=5)
    """

    @classmethod
    def from_toml_text(cls: type[C], text: str) -> C:
        """Deserialise TOML *text* into an instance of the class."""

        return config_adapter(cls).from_toml_text(text)

    @classmethod
    def from_json_text(cls: type[C], text: str) -> C:
        """Deserialise JSON *text* into an instance of the class."""

        return config_adapter(cls).from_json_text(text)

    def validate_and_build(self: C) -> C:
        """Run the ``validate`` hook and return ``self`` once it passes."""

        run_validation(self)
        return self


def _summarise(exc: PydanticValidationError) -> str:
    """Collapse pydantic's error list into a single line."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


__all__ = ["ConfigAdapter", "Config", "config_adapter"]
