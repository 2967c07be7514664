"""Demonstration schema used in the documentation and by the CLI.

``ServiceConfig`` shows the intended usage: a pydantic model mixed with
:class:`~lib_typed_config.application.config.Config`, defaults that render a
useful example document, and a ``validate`` override for rules the field
types cannot express.

Try it with ``python -m lib_typed_config example --schema
lib_typed_config.examples.sample:ServiceConfig``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..application.config import Config
from ..domain.validate import validation_error

MAX_PORT = 65535


class ServiceConfig(Config, BaseModel):
    """Connection settings for a small network service."""

    host: str = "127.0.0.1"
    port: int = 8080
    timeout: int = 30
    tags: list[str] = Field(default_factory=list)

    def validate(self) -> None:  # type: ignore[override]
        if self.timeout < 0:
            raise validation_error("timeout must not be negative", field="timeout")
        if not 1 <= self.port <= MAX_PORT:
            raise validation_error(f"port must be between 1 and {MAX_PORT}", field="port")
        if not self.host.strip():
            raise validation_error("host must not be empty", field="host")


__all__ = ["ServiceConfig"]
