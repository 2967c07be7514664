"""CLI adapter for ``lib_typed_config`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the typed configuration pipeline on the command line so operators can
check a configuration file against a schema, or print example documents,
without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_check` – loads and validates a file, prints the result as JSON.
* :func:`cli_example` – prints example documents for a schema.
* :func:`cli_generate_examples` – writes example files for a schema.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls :mod:`lib_typed_config.core`
and the example helpers and never reaches into adapters directly.
``lib_cli_exit_tools`` centralises the exit code strategy so all commands
behave consistently across shells and CI.
"""

from __future__ import annotations

import json
import sys
from importlib import import_module, metadata
from pathlib import Path
from typing import Any, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .application.config import config_adapter
from .core import load_config
from .examples import generate_examples as _generate_examples
from .examples import render_example

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

FORMAT_CHOICES: Final[tuple[str, ...]] = ("toml", "json")
EXAMPLE_FORMAT_CHOICES: Final[tuple[str, ...]] = ("both", "json", "toml")


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version("lib_typed_config")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Typed configuration loader for TOML and JSON files",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_typed_config",
    message="lib_typed_config version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_typed_config")
    except metadata.PackageNotFoundError:
        click.echo("lib_typed_config (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_typed_config')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument(
    "path",
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option("--schema", "schema_ref", required=True, help="Schema reference as module:attribute")
@click.option(
    "--format",
    "format_hint",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Force the file format instead of inferring it from the extension",
)
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="Indent size of the JSON output",
)
def cli_check(path: Path, schema_ref: str, format_hint: Optional[str], indent: int) -> None:
    """Load PATH, validate it against the schema, and print it as JSON.

    Configuration errors propagate to :func:`main`, which reports them and
    exits non-zero.
    """

    schema = _resolve_schema(schema_ref)
    instance = load_config(path, schema, format_hint=format_hint.lower() if format_hint else None)
    payload = config_adapter(schema).to_python(instance)
    click.echo(json.dumps(payload, indent=indent, ensure_ascii=False))


@cli.command("example", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--schema", "schema_ref", required=True, help="Schema reference as module:attribute")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(EXAMPLE_FORMAT_CHOICES, case_sensitive=False),
    default="both",
    show_default=True,
    help="Which example document(s) to print",
)
def cli_example(schema_ref: str, output_format: str) -> None:
    """Print example documents built from the schema defaults."""

    documents = render_example(_resolve_schema(schema_ref))
    selected = output_format.lower()
    if selected == "json":
        click.echo(documents.json)
    elif selected == "toml":
        click.echo(documents.toml, nl=False)
    else:
        click.echo(documents.render(), nl=False)


@cli.command("generate-examples", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--schema", "schema_ref", required=True, help="Schema reference as module:attribute")
@click.option(
    "--destination",
    type=click.Path(path_type=Path, file_okay=False, dir_okay=True, resolve_path=True),
    required=True,
    help="Directory that will receive the example files",
)
@click.option("--stem", default="config", show_default=True, help="File name stem of the example files")
@click.option(
    "--force/--no-force",
    default=False,
    help="Overwrite existing example files if set",
    show_default=True,
)
def cli_generate_examples(schema_ref: str, destination: Path, stem: str, force: bool) -> None:
    """Write ``<stem>.example.json`` and ``<stem>.example.toml`` for the schema."""

    created = _generate_examples(destination, _resolve_schema(schema_ref), stem=stem, force=force)
    click.echo(json.dumps([str(path) for path in created], indent=2))


def _resolve_schema(reference: str) -> Any:
    """Import ``module:attribute`` (dotted attributes allowed) and return the object."""

    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter("Schema must look like 'package.module:ClassName'.", param_hint="--schema")
    try:
        target: Any = import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"Cannot import module {module_name!r}: {exc}", param_hint="--schema") from exc
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise click.BadParameter(f"{module_name!r} has no attribute {attribute!r}", param_hint="--schema") from exc
    if not isinstance(target, type):
        raise click.BadParameter(f"{reference!r} is not a class", param_hint="--schema")
    return target


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_typed_config",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
