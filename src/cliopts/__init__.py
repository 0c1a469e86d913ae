# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declare command-line options, parse argument vectors, and query the results."""

from __future__ import annotations

from importlib import metadata

from .config import ParserSettings
from .errors import (
    MissingRequiredOptionError,
    MutualExclusionError,
    OptionParseError,
    OptionRegistrationError,
    ParserStateError,
    UnknownOptionError,
    UnrecognizedOptionError,
)
from .models import Option, ParseResult, ParseStatus
from .parser import CommandLineParser

__all__ = [
    "CommandLineParser",
    "MissingRequiredOptionError",
    "MutualExclusionError",
    "Option",
    "OptionParseError",
    "OptionRegistrationError",
    "ParseResult",
    "ParseStatus",
    "ParserSettings",
    "ParserStateError",
    "UnknownOptionError",
    "UnrecognizedOptionError",
    "__version__",
]

try:
    __version__ = metadata.version("cliopts")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
