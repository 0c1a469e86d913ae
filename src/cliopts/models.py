# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures shared by the option registry and parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import OptionParseError


@dataclass(slots=True)
class Option:
    """Registered command-line option and its parse state.

    Attributes:
        name: Unique registry key; always the first alias.
        description: Free-text help shown in usage output.
        aliases: Spellings accepted on the command line, ``name`` first.
        is_set: ``True`` once a matching alias was scanned.
        value: Text attached to the option, empty when none was supplied.
        mutually_exclusive_options: Names of options that must not be set together with this one.
    """

    name: str
    description: str
    aliases: tuple[str, ...]
    is_set: bool = False
    value: str = ""
    mutually_exclusive_options: tuple[str, ...] = ()

    @property
    def mutually_exclusive(self) -> bool:
        """Return ``True`` when any exclusivity constraint was declared."""

        return bool(self.mutually_exclusive_options)

    def mark_set(self, value: str | None = None) -> None:
        """Transition the option to the set state, storing ``value`` when given.

        Args:
            value: Token consumed as the option's value, if any.
        """

        self.is_set = True
        if value is not None:
            self.value = value


class ParseStatus(str, Enum):
    """Enumerate the outcomes of a parse pass."""

    OK = "ok"
    HELP = "help"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Structured outcome returned by :meth:`CommandLineParser.parse`.

    Attributes:
        status: Which outcome the scan reached.
        usage: Usage text rendered for the registry at parse time.
        exit_code: Process status the entry point should exit with.
        error: Violation that stopped parsing when ``status`` is ``ERROR``.
    """

    status: ParseStatus
    usage: str
    exit_code: int = 0
    error: OptionParseError | None = field(default=None)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every token was accepted and constraints hold."""

        return self.status is ParseStatus.OK

    @property
    def help_requested(self) -> bool:
        """Return ``True`` when a help token short-circuited the scan."""

        return self.status is ParseStatus.HELP


__all__ = ["Option", "ParseResult", "ParseStatus"]
