"""Example rendering and generation helpers for ``lib_typed_config``."""

from .generate import ExampleSpec, generate_examples
from .render import ExampleDocuments, print_example, render_example

__all__ = [
    "ExampleDocuments",
    "ExampleSpec",
    "generate_examples",
    "print_example",
    "render_example",
]
