"""Example configuration file generation.

Purpose
-------
Write the example documents of a schema to disk so projects can ship
``config.example.toml``/``config.example.json`` files for onboarding. This
module belongs to the outer ring of the architecture and performs the only
filesystem writes in the library.

Contents
    - ``ExampleSpec``: dataclass capturing a relative path and text content.
    - ``generate_examples``: public orchestration expressed through helper
      verbs.
    - ``_build_specs``: yields one specification per format.
    - ``_write_spec`` / ``_should_write`` / ``_ensure_parent``: tiny filesystem
      helpers that narrate how files are written.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from ..application.config import ConfigAdapter
from .render import ExampleDocuments, render_example


@dataclass(slots=True)
class ExampleSpec:
    """Describe a single example file to be written to disk.

    Attributes
    ----------
    relative_path:
        Path relative to the destination directory.
    content:
        UTF-8 file contents.
    """

    relative_path: Path
    content: str


def generate_examples(
    destination: str | Path,
    schema: type[Any] | ConfigAdapter[Any],
    *,
    stem: str = "config",
    force: bool = False,
) -> list[Path]:
    """Write ``<stem>.example.json`` and ``<stem>.example.toml`` under *destination*.

    Why
    ----
    Keep checked-in example files in sync with the schema defaults instead of
    maintaining them by hand.

    Parameters
    ----------
    destination:
        Directory receiving the files; created when missing.
    schema:
        Configuration type (or adapter) whose default instance is rendered.
    stem:
        File name stem shared by both files.
    force:
        When ``True`` existing files are overwritten; otherwise they are
        skipped.

    Returns
    -------
    list[Path]
        Paths written during this invocation.

    Raises
    ------
    ConfigError
        ``SerialisationError`` from :func:`render_example`; no file is
        written in that case.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> from tempfile import TemporaryDirectory
    >>> @dataclass
    ... class Server:
    ...     port: int = 8080
    >>> tmp = TemporaryDirectory()
    >>> [path.name for path in generate_examples(tmp.name, Server)]
    ['config.example.json', 'config.example.toml']
    >>> generate_examples(tmp.name, Server)
    []
    >>> tmp.cleanup()
    """

    dest = Path(destination)
    documents = render_example(schema)
    specs = _build_specs(documents, stem=stem)
    return _write_examples(dest, specs, force)


def _build_specs(documents: ExampleDocuments, *, stem: str) -> Iterator[ExampleSpec]:
    """Yield one :class:`ExampleSpec` per supported format."""

    yield ExampleSpec(Path(f"{stem}.example.json"), f"{documents.json}\n")
    yield ExampleSpec(Path(f"{stem}.example.toml"), documents.toml)


def _write_examples(destination: Path, specs: Iterator[ExampleSpec], force: bool) -> list[Path]:
    """Write all ``specs`` under *destination* honouring the *force* flag."""

    written: list[Path] = []
    for spec in specs:
        path = destination / spec.relative_path
        if not _should_write(path, force):
            continue
        _ensure_parent(path)
        _write_spec(path, spec)
        written.append(path)
    return written


def _write_spec(path: Path, spec: ExampleSpec) -> None:
    path.write_text(spec.content, encoding="utf-8")


def _should_write(path: Path, force: bool) -> bool:
    return force or not path.exists()


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


__all__ = ["ExampleSpec", "generate_examples"]
