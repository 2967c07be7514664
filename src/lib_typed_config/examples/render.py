"""Example document rendering for configuration schemas.

Purpose
-------
Show configuration authors what a schema looks like on disk by serialising
its default instance in every supported format. The output is an example
document, not a structural schema: it carries values, not field metadata.

Contents
    - ``JSON_HEADING`` / ``TOML_HEADING``: labels preceding each block.
    - ``ExampleDocuments``: the rendered JSON and TOML texts.
    - ``render_example``: serialise the default instance in both formats.
    - ``print_example``: write both blocks to a stream.

System Role
-----------
Backs the ``example`` CLI command and :func:`~lib_typed_config.examples.generate.generate_examples`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, TextIO

from pydantic import ValidationError as PydanticValidationError

from ..adapters.codecs.structured import JSONCodec, TOMLCodec
from ..application.config import ConfigAdapter, config_adapter
from ..domain.errors import ConfigError, ErrorKind

JSON_HEADING = "JSON example:"
TOML_HEADING = "TOML example:"


@dataclass(frozen=True, slots=True)
class ExampleDocuments:
    """Pretty-printed example documents for one schema.

    Attributes
    ----------
    json:
        Indented JSON text without a trailing newline.
    toml:
        TOML text as produced by the ``tomli_w`` writer.
    """

    json: str
    toml: str

    def render(self) -> str:
        """Return both documents as labelled blocks separated by a blank line.

        Examples
        --------
        >>> print(ExampleDocuments(json='{\\n  "port": 8080\\n}', toml='port = 8080\\n').render(), end="")
        JSON example:
        {
          "port": 8080
        }
        <BLANKLINE>
        TOML example:
        port = 8080
        """

        toml_block = self.toml if self.toml.endswith("\n") else f"{self.toml}\n"
        return f"{JSON_HEADING}\n{self.json}\n\n{TOML_HEADING}\n{toml_block}"


def render_example(schema: type[Any] | ConfigAdapter[Any]) -> ExampleDocuments:
    """Serialise the default instance of *schema* to JSON and TOML.

    Why
    ----
    A reference document is only useful when complete, so both
    serialisations finish before anything is returned.

    Raises
    ------
    ConfigError
        ``SerialisationError`` when the default instance cannot be built or
        either serialisation fails; the first failure wins.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Server:
    ...     port: int = 8080
    >>> docs = render_example(Server)
    >>> docs.toml
    'port = 8080\\n'
    """

    adapter = schema if isinstance(schema, ConfigAdapter) else config_adapter(schema)
    payload = adapter.to_python(_default_instance(adapter))
    json_text = JSONCodec().encode(payload)
    toml_text = TOMLCodec().encode(payload)
    return ExampleDocuments(json=json_text, toml=toml_text)


def print_example(schema: type[Any] | ConfigAdapter[Any], stream: TextIO | None = None) -> None:
    """Write the JSON and TOML example documents of *schema* to *stream*.

    Nothing is written when rendering fails. *stream* defaults to
    :data:`sys.stdout`, resolved at call time.
    """

    documents = render_example(schema)
    target = stream if stream is not None else sys.stdout
    target.write(documents.render())
    target.flush()


def _default_instance(adapter: ConfigAdapter[Any]) -> Any:
    try:
        return adapter.default()
    except (TypeError, PydanticValidationError) as exc:
        raise ConfigError(
            f"Failed to construct default {adapter.schema_name}: {exc}",
            kind=ErrorKind.SERIALISATION,
        ) from exc


__all__ = [
    "JSON_HEADING",
    "TOML_HEADING",
    "ExampleDocuments",
    "render_example",
    "print_example",
]
