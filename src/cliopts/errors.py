# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while registering, parsing, and querying options."""

from __future__ import annotations


class OptionParseError(Exception):
    """Base class for problems caused by the supplied command line."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class MutualExclusionError(OptionParseError):
    """Raised when two options declared as conflicting are both present.

    Attributes:
        first: Name of the option that was already set.
        second: Name of the option whose token triggered the conflict.
    """

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f'Options "{first}" and "{second}" are mutually exclusive.')
        self.first = first
        self.second = second


class UnrecognizedOptionError(OptionParseError):
    """Raised when a token does not match any registered alias."""

    def __init__(self, token: str) -> None:
        super().__init__(f'Invalid option "{token}".')
        self.token = token


class MissingRequiredOptionError(OptionParseError):
    """Raised when a required option never appeared on the command line."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is a required option.")
        self.name = name


class UnknownOptionError(OptionParseError, LookupError):
    """Raised when a query names an option that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown option "{name}".')
        self.name = name


class OptionRegistrationError(ValueError):
    """Raised when an option declaration is invalid or inconsistent."""


class ParserStateError(RuntimeError):
    """Raised when the registry is used outside its register/parse/query lifecycle."""


__all__ = [
    "MissingRequiredOptionError",
    "MutualExclusionError",
    "OptionParseError",
    "OptionRegistrationError",
    "ParserStateError",
    "UnknownOptionError",
    "UnrecognizedOptionError",
]
