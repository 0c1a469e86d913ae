# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application that checks argument vectors against TOML option declarations."""

from __future__ import annotations

import json
import logging
from typing import Final

import typer
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from ..console import get_console_manager
from ..declarations import DeclarationError, build_parser, load_declarations
from ..logging import emit_usage, fail
from ..parser import CommandLineParser
from .models import (
    COLOR_OPTION,
    DEBUG_OPTION,
    DECLARATIONS_ARGUMENT,
    EMOJI_OPTION,
    JSON_OPTION,
    PROGRAM_OPTION,
    TOKENS_ARGUMENT,
    ParseCLIOptions,
    build_parse_options,
)
from .typer_ext import create_typer

DECLARATION_ERROR_EXIT_CODE: Final[int] = 2

app = create_typer(
    name="cliopts",
    help="Declare command-line options in TOML and check argument vectors against them.",
    no_args_is_help=True,
)


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    handler = RichHandler(console=get_console_manager().get(color=False, emoji=False, stderr=True))
    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[handler], force=True)


def _load_parser(options: ParseCLIOptions) -> CommandLineParser:
    """Build a parser from the declaration file, exiting on invalid input."""

    try:
        document = load_declarations(options.declarations)
        return build_parser(document, options.settings, program_name=options.program)
    except DeclarationError as exc:
        fail(str(exc), use_emoji=options.settings.use_emoji, use_color=options.settings.use_color)
        raise typer.Exit(code=DECLARATION_ERROR_EXIT_CODE) from exc


def _render_state(parser: CommandLineParser, *, as_json: bool, use_color: bool) -> None:
    snapshot = parser.snapshot()
    if as_json:
        typer.echo(json.dumps(snapshot, indent=2))
        return
    table = Table(title=Text(parser.program_name))
    table.add_column("Option")
    table.add_column("Set")
    table.add_column("Value")
    for name, state in snapshot.items():
        table.add_row(Text(name), "yes" if state["set"] else "no", Text(str(state["value"])))
    get_console_manager().get(color=use_color, emoji=False).print(table)


@app.command("usage")
def usage_command(
    declarations: DECLARATIONS_ARGUMENT,
    program: PROGRAM_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Print the usage text generated from DECLARATIONS."""

    options = build_parse_options(declarations, program=program, debug=debug)
    _configure_logging(options.debug)
    emit_usage(_load_parser(options).format_usage())


@app.command("parse")
def parse_command(
    declarations: DECLARATIONS_ARGUMENT,
    tokens: TOKENS_ARGUMENT = None,
    program: PROGRAM_OPTION = None,
    as_json: JSON_OPTION = False,
    color: COLOR_OPTION = True,
    use_emoji: EMOJI_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Parse TOKENS against DECLARATIONS and report each option's state.

    Exits 0 on success or when a help token is present, 1 when the tokens
    violate the declarations, and 2 when the declaration file is invalid.
    """

    options = build_parse_options(
        declarations,
        tokens,
        program=program,
        as_json=as_json,
        color=color,
        use_emoji=use_emoji,
        debug=debug,
    )
    _configure_logging(options.debug)
    parser = _load_parser(options)
    try:
        parser.parse_or_exit(options.tokens)
    except SystemExit as exc:
        raise typer.Exit(code=exc.code if isinstance(exc.code, int) else 1) from None
    _render_state(parser, as_json=options.as_json, use_color=options.settings.use_color)


__all__ = ["app"]
