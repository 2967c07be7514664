"""Public package surface of ``lib_typed_config``.

Load TOML or JSON configuration files into application-defined types and get
back validated instances::

    from lib_typed_config import Config, load_config, validation_error

``import lib_typed_config`` and ``python -m lib_typed_config`` expose the same
stable API; everything else is an implementation detail.
"""

from __future__ import annotations

from .application.config import Config, ConfigAdapter, config_adapter
from .core import detect_format, load_config, parse_config
from .domain.errors import ConfigError, ErrorKind
from .domain.formats import ConfigFormat
from .domain.validate import Validate, run_validation, validation_error
from .examples import ExampleDocuments, generate_examples, print_example, render_example
from .observability import bind_trace_id, get_logger

__all__ = [
    "Config",
    "ConfigAdapter",
    "ConfigError",
    "ConfigFormat",
    "ErrorKind",
    "ExampleDocuments",
    "Validate",
    "bind_trace_id",
    "config_adapter",
    "detect_format",
    "generate_examples",
    "get_logger",
    "load_config",
    "parse_config",
    "print_example",
    "render_example",
    "run_validation",
    "validation_error",
]
