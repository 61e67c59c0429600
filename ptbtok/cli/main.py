"""Main CLI entry point for the ptbtok package.

This module provides the ``ptbtok`` command group with the ``tokenize``,
``untok`` and ``options`` commands.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ptbtok import __version__
from ptbtok.cli.utils import (
    format_output,
    iter_inputs,
    load_config_for_cli,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from ptbtok.config import TokenizerOptions, merge_options
from ptbtok.errors import OptionsError
from ptbtok.tokenization import PTBTokenizer, Token, ptb_to_text, token_factory
from ptbtok.tokenization.normalizer import NEWLINE_TOKEN

logger = logging.getLogger(__name__)

_INPUT_FILES = click.Path(exists=True, dir_okay=False, path_type=Path, allow_dash=True)


@click.group()
@click.version_option(version=__version__, prog_name="ptbtok")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: built-in defaults)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress all output except errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    r"""Penn Treebank tokenizer.

    Splits text into Treebank tokens and turns token streams back into
    text.

    \b
    Examples:
        # Tokenize a file, one token per line
        $ ptbtok tokenize story.txt

        # Keep line breaks, ASCII quotes
        $ ptbtok tokenize --preserve-lines -o quotes=ascii story.txt

        # Full token records as JSON lines
        $ ptbtok tokenize --dump story.txt

        # Detokenize
        $ ptbtok untok story.tok

        # Show resolved options
        $ ptbtok -c ptbtok.yaml options
    """
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


def _resolve_options(ctx: click.Context, option_string: str | None) -> TokenizerOptions:
    """Combine configuration file options with ``--options``."""
    config = load_config_for_cli(
        ctx.obj.get("config_file"),
        verbose=ctx.obj.get("verbose", False),
        quiet=ctx.obj.get("quiet", False),
    )
    try:
        return merge_options(config.tokenizer, option_string)
    except OptionsError as e:
        print_error(str(e))
        raise  # For type checking


def _format_token(token: Token, lower_case: bool, dump: bool) -> str:
    text = token.text.lower() if lower_case else token.text
    if dump:
        return token.model_copy(update={"text": text}).model_dump_json()
    return text


@cli.command()
@click.argument("files", nargs=-1, type=_INPUT_FILES)
@click.option(
    "--options",
    "-o",
    "option_string",
    type=str,
    default=None,
    help="Tokenizer options (e.g., 'invertible,quotes=ascii')",
)
@click.option(
    "--preserve-lines",
    is_flag=True,
    default=False,
    help="Keep line breaks; tokens of a line are separated by spaces",
)
@click.option(
    "--lower-case",
    is_flag=True,
    default=False,
    help="Lower case token text",
)
@click.option(
    "--dump",
    is_flag=True,
    default=False,
    help="Write every token with all its fields as a JSON line",
)
@click.option(
    "--encoding",
    type=str,
    default="utf-8",
    show_default=True,
    help="Input encoding",
)
@click.pass_context
def tokenize(
    ctx: click.Context,
    files: tuple[Path, ...],
    option_string: str | None,
    preserve_lines: bool,
    lower_case: bool,
    dump: bool,
    encoding: str,
) -> None:
    r"""Tokenize FILES (standard input when none are given).

    Prints one token per line, or one input line per output line with
    --preserve-lines.

    \b
    Examples:
        $ ptbtok tokenize story.txt
        $ echo "I can't go." | ptbtok tokenize --preserve-lines
        $ ptbtok tokenize -o strictTreebank3 --dump story.txt
    """
    options = _resolve_options(ctx, option_string)
    if preserve_lines:
        options = options.model_copy(update={"tokenize_newlines": True})
    if dump:
        options = options.model_copy(update={"invertible": True})

    total = 0
    try:
        for name, stream in iter_inputs(files, encoding):
            logger.debug("Tokenizing %s", name)
            tokenizer = PTBTokenizer(stream, token_factory, options)
            count = 0
            line: list[str] = []
            for token in tokenizer:
                count += 1
                if preserve_lines and not dump:
                    if token.text == NEWLINE_TOKEN:
                        click.echo(" ".join(line))
                        line = []
                    else:
                        line.append(_format_token(token, lower_case, dump))
                    continue
                click.echo(_format_token(token, lower_case, dump))
            if line:
                click.echo(" ".join(line))
            if count == 0 and not ctx.obj.get("quiet", False):
                print_warning(f"No tokens in {name}")
            total += count
    except UnicodeDecodeError as e:
        print_error(f"Cannot decode input as {encoding}: {e}")

    if ctx.obj.get("verbose", False):
        print_info(f"Produced {total} tokens")


@cli.command()
@click.argument("files", nargs=-1, type=_INPUT_FILES)
@click.option(
    "--encoding",
    type=str,
    default="utf-8",
    show_default=True,
    help="Input encoding",
)
def untok(files: tuple[Path, ...], encoding: str) -> None:
    r"""Detokenize FILES line by line (standard input when none are given).

    \b
    Examples:
        $ ptbtok untok story.tok
        $ echo "I ca n't go ." | ptbtok untok
    """
    try:
        for _, stream in iter_inputs(files, encoding):
            for line in stream:
                click.echo(ptb_to_text(line.rstrip("\r\n")))
    except UnicodeDecodeError as e:
        print_error(f"Cannot decode input as {encoding}: {e}")


@cli.command(name="options")
@click.option(
    "--options",
    "-o",
    "option_string",
    type=str,
    default=None,
    help="Tokenizer options applied on top of the configuration file",
)
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["table", "yaml", "json"], case_sensitive=False),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--output",
    "-O",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the options as a YAML configuration file instead",
)
@click.pass_context
def show_options(
    ctx: click.Context,
    option_string: str | None,
    format_type: str,
    output: Path | None,
) -> None:
    r"""Display the resolved tokenizer options.

    \b
    Examples:
        $ ptbtok options
        $ ptbtok options -o "ptb3Escaping=false" --format yaml
        $ ptbtok options -o invertible --output ptbtok.yaml
    """
    options = _resolve_options(ctx, option_string)

    if output is not None:
        output.write_text(
            format_output({"tokenizer": options.model_dump()}, "yaml"),
            encoding="utf-8",
        )
        print_success(f"Wrote options to {output}")
        return

    data = options.model_dump(by_alias=True)
    click.echo(format_output(data, format_type.lower()))  # type: ignore[arg-type]


if __name__ == "__main__":
    cli()
