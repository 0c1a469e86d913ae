# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser settings controlling program naming, help tokens, and exit codes."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PROGRAM_NAME: Final[str] = "[program]"
DEFAULT_HELP_TOKENS: Final[tuple[str, ...]] = ("-h", "--help")
DEFAULT_VALUE_PREFIX: Final[str] = "-"
DEFAULT_ERROR_EXIT_CODE: Final[int] = 1
DEFAULT_HELP_EXIT_CODE: Final[int] = 0


class ParserSettings(BaseModel):
    """Immutable settings consumed by :class:`~cliopts.parser.CommandLineParser`."""

    model_config = ConfigDict(frozen=True)

    program_name: str = DEFAULT_PROGRAM_NAME
    help_tokens: tuple[str, ...] = Field(default=DEFAULT_HELP_TOKENS)
    value_prefix: str = Field(default=DEFAULT_VALUE_PREFIX, min_length=1)
    error_exit_code: int = DEFAULT_ERROR_EXIT_CODE
    help_exit_code: int = DEFAULT_HELP_EXIT_CODE
    use_color: bool = False
    use_emoji: bool = False

    @field_validator("error_exit_code")
    @classmethod
    def _error_code_nonzero(cls, value: int) -> int:
        """Reject a zero error exit status.

        Args:
            value: Candidate exit status for parse failures.

        Returns:
            int: The validated exit status.

        Raises:
            ValueError: If ``value`` is zero.
        """

        if value == 0:
            raise ValueError("error_exit_code must be non-zero")
        return value

    @field_validator("help_tokens")
    @classmethod
    def _help_tokens_nonempty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not token for token in value):
            raise ValueError("help tokens must be non-empty strings")
        return value

    def with_program(self, program_name: str | None) -> ParserSettings:
        """Return a copy using ``program_name`` when one is supplied.

        Args:
            program_name: Optional replacement for :attr:`program_name`.

        Returns:
            ParserSettings: Updated settings, or ``self`` when nothing changes.
        """

        if not program_name:
            return self
        return self.model_copy(update={"program_name": program_name})


__all__ = [
    "DEFAULT_ERROR_EXIT_CODE",
    "DEFAULT_HELP_EXIT_CODE",
    "DEFAULT_HELP_TOKENS",
    "DEFAULT_PROGRAM_NAME",
    "DEFAULT_VALUE_PREFIX",
    "ParserSettings",
]
