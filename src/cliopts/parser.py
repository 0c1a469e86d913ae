# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Register command-line options, scan an argument vector, and query the results.

Typical use::

    parser = CommandLineParser("demo")
    parser.add_option("--file", "Output file", ["-f"])
    parser.add_option("--verbose", "Chatty output", required=True)
    result = parser.parse_or_exit()
    if parser.has_option("--file"):
        target = parser.get_option_value("--file")

:meth:`CommandLineParser.parse` never prints or exits; it returns a
:class:`~cliopts.models.ParseResult`. :meth:`CommandLineParser.parse_or_exit`
is the thin entry-point wrapper that reports the outcome and terminates the
process on help or error.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence

from .config import ParserSettings
from .errors import (
    MissingRequiredOptionError,
    MutualExclusionError,
    OptionParseError,
    ParserStateError,
    UnrecognizedOptionError,
)
from .logging import emit_usage, fail
from .models import Option, ParseResult, ParseStatus
from .registry import OptionRegistry
from .usage import format_usage

LOGGER = logging.getLogger(__name__)


class CommandLineParser:
    """Option registry plus a single-pass parser over an argument vector."""

    def __init__(self, program_name: str | None = None, *, settings: ParserSettings | None = None) -> None:
        """Initialise an empty parser.

        Args:
            program_name: Name shown in usage text; overrides ``settings``.
            settings: Parser settings; defaults to :class:`ParserSettings`.
        """

        self.settings = (settings or ParserSettings()).with_program(program_name)
        self._registry = OptionRegistry(reserved_aliases=self.settings.help_tokens)
        self._result: ParseResult | None = None

    @property
    def program_name(self) -> str:
        return self.settings.program_name

    @property
    def options(self) -> tuple[Option, ...]:
        """Return registered options in registration order."""

        return tuple(self._registry)

    @property
    def parsed(self) -> bool:
        """Return ``True`` once :meth:`parse` has run."""

        return self._result is not None

    @property
    def result(self) -> ParseResult | None:
        """Return the outcome of the parse pass, ``None`` before parsing."""

        return self._result

    def add_option(
        self,
        name: str,
        description: str,
        aliases: Sequence[str] = (),
        required: bool = False,
        mutually_exclusive_with: Sequence[str] = (),
    ) -> Option:
        """Declare a command-line option.

        Args:
            name: Unique option name; also accepted on the command line.
            description: Help text shown in usage output.
            aliases: Additional spellings of the option.
            required: ``True`` when the option must appear.
            mutually_exclusive_with: Names of options that cannot be used together with this one.

        Returns:
            Option: The registered option record.

        Raises:
            OptionRegistrationError: If the declaration is invalid or duplicates an existing one.
            ParserStateError: If called after :meth:`parse`.
        """

        if self.parsed:
            raise ParserStateError("options cannot be added after parsing")
        return self._registry.add(
            name,
            description,
            aliases,
            required=required,
            mutually_exclusive_with=mutually_exclusive_with,
        )

    def validate(self) -> None:
        """Check that every exclusivity constraint names a registered option.

        Raises:
            OptionRegistrationError: If a constraint references an unknown name.
        """

        self._registry.check_references()

    def format_usage(self) -> str:
        """Return the usage block listing every registered option."""

        return format_usage(self.program_name, self._registry)

    def parse(self, args: Sequence[str]) -> ParseResult:
        """Scan ``args`` (program name excluded) and record option state.

        A help token anywhere in ``args`` short-circuits the scan. Otherwise
        tokens are matched left to right; a token that does not start with the
        value prefix and follows a matched option becomes that option's value.
        Scanning stops at the first violation.

        Args:
            args: Raw argument tokens, conventionally ``sys.argv[1:]``.

        Returns:
            ParseResult: Structured outcome of the pass.

        Raises:
            OptionRegistrationError: If an exclusivity constraint names an unregistered option.
            ParserStateError: If the parser was already used.
        """

        if self.parsed:
            raise ParserStateError("command line has already been parsed")
        self.validate()
        tokens = list(args)
        usage = self.format_usage()

        if any(token in self.settings.help_tokens for token in tokens):
            LOGGER.debug("help requested in %s", tokens)
            self._result = ParseResult(ParseStatus.HELP, usage, self.settings.help_exit_code)
            return self._result

        try:
            self._scan(tokens)
            self._check_required()
        except OptionParseError as exc:
            LOGGER.debug("parse failed: %s", exc)
            self._result = ParseResult(ParseStatus.ERROR, usage, self.settings.error_exit_code, exc)
            return self._result

        LOGGER.debug("parsed %d token(s)", len(tokens))
        self._result = ParseResult(ParseStatus.OK, usage)
        return self._result

    def _scan(self, tokens: list[str]) -> None:
        index = 0
        while index < len(tokens):
            token = tokens[index]
            option = self._registry.resolve(token)
            if option is None:
                raise UnrecognizedOptionError(token)
            conflict = next(self._registry.conflicts(option), None)
            if conflict is not None:
                raise MutualExclusionError(conflict.name, option.name)

            value = None
            if index + 1 < len(tokens) and not tokens[index + 1].startswith(self.settings.value_prefix):
                index += 1
                value = tokens[index]
            option.mark_set(value)
            LOGGER.debug("token %r -> %s value=%r", token, option.name, value)
            index += 1

    def _check_required(self) -> None:
        for name in self._registry.required:
            if not self.has_option(name):
                raise MissingRequiredOptionError(name)

    def parse_or_exit(self, args: Sequence[str] | None = None) -> ParseResult:
        """Parse ``args`` and terminate the process on help or error.

        Help prints the usage block to stdout and exits with
        ``settings.help_exit_code``. Errors print ``Error: <message>`` and the
        usage block to stderr and exit with ``settings.error_exit_code``.

        Args:
            args: Argument tokens; defaults to ``sys.argv[1:]``.

        Returns:
            ParseResult: The successful outcome.

        Raises:
            SystemExit: On help or any parse error.
        """

        result = self.parse(sys.argv[1:] if args is None else args)
        if result.help_requested:
            emit_usage(result.usage)
            raise SystemExit(result.exit_code)
        if result.error is not None:
            fail(str(result.error), use_emoji=self.settings.use_emoji, use_color=self.settings.use_color)
            emit_usage(result.usage, stderr=True)
            raise SystemExit(result.exit_code)
        return result

    def has_option(self, name: str) -> bool:
        """Return ``True`` when ``name`` is registered and was set; never raises."""

        return name in self._registry and self._registry.get(name).is_set

    def get_option_value(self, name: str) -> str:
        """Return the value attached to ``name``, empty when none was given.

        Raises:
            UnknownOptionError: If ``name`` was never registered.
        """

        return self._registry.get(name).value

    def get_option_description(self, name: str) -> str:
        """Return the description registered for ``name``.

        Raises:
            UnknownOptionError: If ``name`` was never registered.
        """

        return self._registry.get(name).description

    def snapshot(self) -> Mapping[str, Mapping[str, str | bool]]:
        """Return ``{name: {"set": bool, "value": str}}`` in registration order."""

        return {option.name: {"set": option.is_set, "value": option.value} for option in self._registry}


__all__ = ["CommandLineParser"]
