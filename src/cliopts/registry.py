# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered store of option definitions with alias and constraint bookkeeping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from .errors import OptionRegistrationError, UnknownOptionError
from .models import Option

LOGGER = logging.getLogger(__name__)


class OptionRegistry:
    """Own every :class:`Option` keyed by name, in registration order.

    Duplicate names and aliases shared between options are rejected, so an
    alias resolves to at most one option.
    """

    def __init__(self, *, reserved_aliases: Iterable[str] = ()) -> None:
        """Initialise an empty registry.

        Args:
            reserved_aliases: Tokens no option may claim (e.g. help flags).
        """

        self._options: dict[str, Option] = {}
        self._alias_index: dict[str, str] = {}
        self._required: list[str] = []
        self._reserved = frozenset(reserved_aliases)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    @property
    def required(self) -> tuple[str, ...]:
        """Return required option names in registration order."""

        return tuple(self._required)

    def add(
        self,
        name: str,
        description: str,
        aliases: Sequence[str] = (),
        *,
        required: bool = False,
        mutually_exclusive_with: Sequence[str] = (),
    ) -> Option:
        """Register a new option.

        Args:
            name: Unique option name, also accepted as the first alias.
            description: Help text shown in usage output.
            aliases: Additional spellings, kept in the order given.
            required: ``True`` when parsing must fail if the option is absent.
            mutually_exclusive_with: Names of options that conflict with this one.

        Returns:
            Option: The stored option record.

        Raises:
            OptionRegistrationError: If the name or an alias is empty, already
                registered, reserved, a bare string is passed where a sequence
                is expected, or the option excludes itself.
        """

        if not isinstance(name, str) or not name:
            raise OptionRegistrationError("option name must be a non-empty string")
        if name in self._options:
            raise OptionRegistrationError(f'option "{name}" is already registered')
        if isinstance(aliases, str):
            raise OptionRegistrationError(f'aliases of option "{name}" must be a sequence of strings, not a string')
        if isinstance(mutually_exclusive_with, str):
            raise OptionRegistrationError(
                f'mutually exclusive options of "{name}" must be a sequence of strings, not a string'
            )
        spellings = self._collect_aliases(name, aliases)
        exclusive = tuple(dict.fromkeys(mutually_exclusive_with))
        if name in exclusive:
            raise OptionRegistrationError(f'option "{name}" cannot be mutually exclusive with itself')

        option = Option(
            name=name,
            description=description,
            aliases=spellings,
            mutually_exclusive_options=exclusive,
        )
        self._options[name] = option
        for alias in spellings:
            self._alias_index[alias] = name
        if required:
            self._required.append(name)
        LOGGER.debug("registered option %s aliases=%s required=%s", name, spellings, required)
        return option

    def _collect_aliases(self, name: str, aliases: Sequence[str]) -> tuple[str, ...]:
        spellings = tuple(dict.fromkeys((name, *aliases)))
        for alias in spellings:
            if not isinstance(alias, str) or not alias:
                raise OptionRegistrationError(f'option "{name}" has an empty alias')
            if alias in self._reserved:
                raise OptionRegistrationError(f'alias "{alias}" of option "{name}" is reserved')
            owner = self._alias_index.get(alias)
            if owner is not None:
                raise OptionRegistrationError(f'alias "{alias}" of option "{name}" is already used by "{owner}"')
        return spellings

    def get(self, name: str) -> Option:
        """Return the option registered under ``name``.

        Args:
            name: Registry key to look up.

        Returns:
            Option: Matching option record.

        Raises:
            UnknownOptionError: If ``name`` was never registered.
        """

        try:
            return self._options[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def resolve(self, token: str) -> Option | None:
        """Return the option owning ``token`` as an alias, if any."""

        name = self._alias_index.get(token)
        return None if name is None else self._options[name]

    def conflicts(self, option: Option) -> Iterator[Option]:
        """Yield set options that are mutually exclusive with ``option``.

        A conflict exists when either option lists the other, in the order the
        candidates were registered.
        """

        for other in self._options.values():
            if other is option or not other.is_set:
                continue
            if other.name in option.mutually_exclusive_options or option.name in other.mutually_exclusive_options:
                yield other

    def check_references(self) -> None:
        """Verify every exclusivity target names a registered option.

        Raises:
            OptionRegistrationError: If a constraint references an unknown name.
        """

        for option in self._options.values():
            missing = [target for target in option.mutually_exclusive_options if target not in self._options]
            if missing:
                joined = ", ".join(missing)
                raise OptionRegistrationError(
                    f'option "{option.name}" is mutually exclusive with unregistered option(s): {joined}'
                )


__all__ = ["OptionRegistry"]
