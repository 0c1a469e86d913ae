# SPDX-License-Identifier: MIT
"""Typer parameter declarations and normalised inputs for the ``cliopts`` commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import ParserSettings

DECLARATIONS_ARGUMENT = Annotated[
    Path,
    typer.Argument(metavar="DECLARATIONS", help="TOML file declaring the options."),
]
TOKENS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(metavar="[-- TOKENS...]", help="Argument vector to parse, after '--'."),
]
PROGRAM_OPTION = Annotated[
    str | None,
    typer.Option("--program", "-p", help="Program name shown in usage text."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Print parsed option state as JSON."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Colour diagnostics when writing to a terminal."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Prefix diagnostics with emoji."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Log registration and token matching to stderr."),
]


@dataclass(slots=True)
class ParseCLIOptions:
    """Normalised CLI inputs shared by the ``usage`` and ``parse`` commands."""

    declarations: Path
    tokens: tuple[str, ...]
    program: str | None
    as_json: bool
    debug: bool
    settings: ParserSettings


def build_parse_options(
    declarations: Path,
    tokens: list[str] | None = None,
    *,
    program: str | None = None,
    as_json: bool = False,
    color: bool = True,
    use_emoji: bool = False,
    debug: bool = False,
) -> ParseCLIOptions:
    """Construct :class:`ParseCLIOptions` from Typer parameters."""

    return ParseCLIOptions(
        declarations=declarations.expanduser(),
        tokens=tuple(tokens or ()),
        program=program,
        as_json=as_json,
        debug=debug,
        settings=ParserSettings(use_color=color, use_emoji=use_emoji),
    )


__all__ = [
    "COLOR_OPTION",
    "DEBUG_OPTION",
    "DECLARATIONS_ARGUMENT",
    "EMOJI_OPTION",
    "JSON_OPTION",
    "PROGRAM_OPTION",
    "TOKENS_ARGUMENT",
    "ParseCLIOptions",
    "build_parse_options",
]
