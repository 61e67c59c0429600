"""Helpers shared by the ptbtok commands.

Messages go to a rich console on standard error so that standard output
carries only tokens, text or rendered options.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator, Mapping
from io import StringIO
from pathlib import Path
from typing import IO, Any, Literal

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ptbtok.config import PtbtokConfig, configure_logging, load_config
from ptbtok.errors import OptionsError

type OptionValue = str | int | float | bool | None

console = Console(stderr=True)


def load_config_for_cli(
    config_file: Path | str | None,
    verbose: bool,
    quiet: bool,
    **overrides: Any,
) -> PtbtokConfig:
    """Resolve the configuration for a command and apply its logging section.

    ``--verbose`` forces DEBUG logging and ``--quiet`` forces ERROR; either
    wins over the file. Any failure is reported and exits with status 1.

    Parameters
    ----------
    config_file : Path | str | None
        YAML file given with ``--config-file``, if any.
    verbose : bool
        Whether ``--verbose`` was given.
    quiet : bool
        Whether ``--quiet`` was given.
    **overrides : Any
        ``section__field`` values forwarded to ``load_config``.

    Returns
    -------
    PtbtokConfig
        The loaded configuration.
    """
    if verbose:
        overrides["logging__level"] = "DEBUG"
    elif quiet:
        overrides["logging__level"] = "ERROR"

    try:
        config = load_config(config_path=config_file, **overrides)
    except FileNotFoundError:
        print_error(f"Configuration file not found: {config_file}")
        raise  # For type checking
    except (OptionsError, ValidationError, yaml.YAMLError) as e:
        print_error(f"Invalid configuration: {e}")
        raise  # For type checking

    configure_logging(config.logging)
    if verbose and config_file:
        print_info(f"Using configuration from {config_file}")
    return config


def iter_inputs(
    files: tuple[Path, ...], encoding: str
) -> Iterator[tuple[str, IO[str]]]:
    """Yield ``(name, stream)`` for each input, standard input when none.

    A path of ``-`` also means standard input. Files are opened lazily and
    closed before the next one is opened.
    """
    if not files:
        yield "<stdin>", click.get_text_stream("stdin", encoding=encoding)
        return
    for path in files:
        if str(path) == "-":
            yield "<stdin>", click.get_text_stream("stdin", encoding=encoding)
            continue
        with open(path, encoding=encoding) as stream:
            yield str(path), stream


def format_output(
    data: Mapping[str, Any],
    format_type: Literal["yaml", "json", "table"],
) -> str:
    """Render a mapping of options for display.

    Parameters
    ----------
    data : Mapping[str, Any]
        Option names and values; nested mappings are allowed for ``yaml``
        and ``json``.
    format_type : {"yaml", "json", "table"}
        Output format.

    Returns
    -------
    str
        The rendered text.

    Raises
    ------
    ValueError
        If ``format_type`` is unknown.
    """
    if format_type == "yaml":
        return yaml.safe_dump(dict(data), default_flow_style=False, sort_keys=False)
    if format_type == "json":
        return json.dumps(data, indent=2)
    if format_type == "table":
        return _options_table(data)
    raise ValueError(f"Invalid format type: {format_type}")


def _display_value(value: OptionValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


def _options_table(data: Mapping[str, Any]) -> str:
    table = Table(title="Tokenizer options", header_style="bold cyan")
    table.add_column("Option", style="yellow", no_wrap=True)
    table.add_column("Value")
    for name, value in data.items():
        table.add_row(name, _display_value(value))

    buffer = StringIO()
    Console(file=buffer, force_terminal=True, width=120).print(table)
    return buffer.getvalue()


def print_error(message: str, exit_code: int = 1) -> None:
    """Report an error and exit with ``exit_code`` unless it is 0."""
    console.print(f"[red]✗ Error:[/red] {message}", highlight=False)
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    """Report a completed action."""
    console.print(f"[green]✓ {message}[/green]", highlight=False)


def print_warning(message: str) -> None:
    """Report a problem that does not stop the command."""
    console.print(f"[yellow]⚠ Warning:[/yellow] {message}", highlight=False)


def print_info(message: str) -> None:
    """Report progress shown with ``--verbose``."""
    console.print(f"[blue]ℹ Info:[/blue] {message}", highlight=False)
