# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load option declarations from TOML and build parsers from them."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import ParserSettings
from .errors import OptionRegistrationError
from .parser import CommandLineParser

OPTION_TABLE_KEY: Final[str] = "option"


class DeclarationError(Exception):
    """Raised when a declaration document is unreadable or invalid."""


class OptionDeclaration(BaseModel):
    """Single ``[[option]]`` entry of a declaration document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    aliases: tuple[str, ...] = ()
    required: bool = False
    mutually_exclusive_with: tuple[str, ...] = ()


class DeclarationDocument(BaseModel):
    """Top-level declaration document."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    program: str | None = None
    options: tuple[OptionDeclaration, ...] = Field(default=(), alias=OPTION_TABLE_KEY)


def parse_declarations(data: Mapping[str, Any], *, source: str = "<mapping>") -> DeclarationDocument:
    """Validate raw declaration data.

    Args:
        data: Mapping decoded from TOML (or built in code).
        source: Label used in error messages.

    Returns:
        DeclarationDocument: Validated declarations.

    Raises:
        DeclarationError: If ``data`` does not match the declaration schema.
    """

    try:
        return DeclarationDocument.model_validate(data)
    except ValidationError as exc:
        raise DeclarationError(f"Invalid option declarations in {source}: {exc}") from exc


def load_declarations(path: Path) -> DeclarationDocument:
    """Read and validate a TOML declaration file.

    Args:
        path: Location of the TOML document.

    Returns:
        DeclarationDocument: Validated declarations.

    Raises:
        DeclarationError: If the file is missing, not valid TOML, or fails validation.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise DeclarationError(f"Unable to read {path}: {exc.strerror or exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise DeclarationError(f"Invalid TOML in {path}: {exc}") from exc
    return parse_declarations(data, source=str(path))


def build_parser(
    document: DeclarationDocument,
    settings: ParserSettings | None = None,
    *,
    program_name: str | None = None,
) -> CommandLineParser:
    """Return a parser with every declaration registered in document order.

    The program name is taken from ``program_name``, then the document's
    ``program``, then ``settings``.

    Args:
        document: Validated declarations.
        settings: Parser settings to apply.
        program_name: Explicit program name override.

    Returns:
        CommandLineParser: Parser ready for :meth:`~CommandLineParser.parse`.

    Raises:
        DeclarationError: If a declaration is rejected by the registry or an
            exclusivity constraint names an undeclared option.
    """

    parser = CommandLineParser(program_name or document.program, settings=settings)
    try:
        for declaration in document.options:
            parser.add_option(
                declaration.name,
                declaration.description,
                declaration.aliases,
                required=declaration.required,
                mutually_exclusive_with=declaration.mutually_exclusive_with,
            )
        parser.validate()
    except OptionRegistrationError as exc:
        raise DeclarationError(str(exc)) from exc
    return parser


__all__ = [
    "DeclarationDocument",
    "DeclarationError",
    "OptionDeclaration",
    "build_parser",
    "load_declarations",
    "parse_declarations",
]
