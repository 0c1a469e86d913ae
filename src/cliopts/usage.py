# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render the usage block listing every registered option."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .models import Option

OPTION_INDENT: Final[str] = "  "
DETAIL_INDENT: Final[str] = "      "
ALIAS_SEPARATOR: Final[str] = ", "


def format_option(option: Option) -> str:
    """Return the usage lines describing a single option.

    Every alias is followed by ``", "``, including the last one.

    Args:
        option: Option to describe.

    Returns:
        str: Newline-terminated usage lines for ``option``.
    """

    aliases = "".join(f"{alias}{ALIAS_SEPARATOR}" for alias in option.aliases)
    lines = [f"{OPTION_INDENT}{aliases}", f"{DETAIL_INDENT}{option.description}"]
    if option.mutually_exclusive:
        names = "".join(f" {name}" for name in option.mutually_exclusive_options)
        lines.append(f"{DETAIL_INDENT}Mutually exclusive with:{names}")
    return "".join(f"{line}\n" for line in lines)


def format_usage(program_name: str, options: Iterable[Option]) -> str:
    """Return the full usage text for ``program_name``.

    Args:
        program_name: Program name displayed on the first line.
        options: Options in the order they should be listed.

    Returns:
        str: Usage block terminated by a newline.
    """

    header = f"Usage: {program_name} [options]\nOptions:\n"
    return header + "".join(format_option(option) for option in options)


__all__ = ["format_option", "format_usage"]
