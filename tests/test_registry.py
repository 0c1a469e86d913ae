# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for option registration rules."""

from __future__ import annotations

import pytest

from cliopts import CommandLineParser, OptionRegistrationError
from cliopts.registry import OptionRegistry


def test_name_is_first_alias_followed_by_aliases_in_order() -> None:
    cli = CommandLineParser()
    option = cli.add_option("--output", "Output file", ["-o", "--out"])

    assert option.aliases == ("--output", "-o", "--out")


def test_repeated_alias_within_option_is_collapsed() -> None:
    registry = OptionRegistry()
    option = registry.add("--output", "Output file", ["-o", "--output", "-o"])

    assert option.aliases == ("--output", "-o")


def test_exclusivity_flag_follows_declared_constraints() -> None:
    registry = OptionRegistry()
    plain = registry.add("--a", "a")
    constrained = registry.add("--b", "b", mutually_exclusive_with=["--a", "--c", "--a"])

    assert plain.mutually_exclusive is False
    assert constrained.mutually_exclusive is True
    assert constrained.mutually_exclusive_options == ("--a", "--c")


def test_required_names_keep_registration_order() -> None:
    registry = OptionRegistry()
    registry.add("--z", "z", required=True)
    registry.add("--m", "m")
    registry.add("--a", "a", required=True)

    assert registry.required == ("--z", "--a")
    assert [option.name for option in registry] == ["--z", "--m", "--a"]
    assert len(registry) == 3
    assert "--m" in registry


def test_duplicate_name_is_rejected() -> None:
    cli = CommandLineParser()
    cli.add_option("--a", "first")

    with pytest.raises(OptionRegistrationError, match="already registered"):
        cli.add_option("--a", "second")
    assert cli.get_option_description("--a") == "first"


def test_alias_shared_between_options_is_rejected() -> None:
    cli = CommandLineParser()
    cli.add_option("--quiet", "Less output", ["-q"])

    with pytest.raises(OptionRegistrationError, match='already used by "--quiet"'):
        cli.add_option("--query", "Query string", ["-q"])
    assert [option.name for option in cli.options] == ["--quiet"]


def test_name_colliding_with_existing_alias_is_rejected() -> None:
    cli = CommandLineParser()
    cli.add_option("--quiet", "Less output", ["-q"])

    with pytest.raises(OptionRegistrationError):
        cli.add_option("-q", "Shadow")


@pytest.mark.parametrize("name", ["", None])
def test_empty_name_is_rejected(name: str) -> None:
    with pytest.raises(OptionRegistrationError):
        CommandLineParser().add_option(name, "nameless")


def test_empty_alias_is_rejected() -> None:
    with pytest.raises(OptionRegistrationError, match="empty alias"):
        CommandLineParser().add_option("--a", "a", [""])


@pytest.mark.parametrize("alias", ["-h", "--help"])
def test_help_tokens_are_reserved(alias: str) -> None:
    with pytest.raises(OptionRegistrationError, match="reserved"):
        CommandLineParser().add_option("--host", "Host", [alias])


def test_bare_string_aliases_are_rejected() -> None:
    cli = CommandLineParser()

    with pytest.raises(OptionRegistrationError, match="not a string"):
        cli.add_option("--file", "Output file", "-f")
    assert cli.options == ()


def test_bare_string_exclusivity_is_rejected() -> None:
    cli = CommandLineParser()
    cli.add_option("--a", "a")

    with pytest.raises(OptionRegistrationError, match="not a string"):
        cli.add_option("--b", "b", mutually_exclusive_with="--a")
    assert [option.name for option in cli.options] == ["--a"]


def test_self_exclusion_is_rejected() -> None:
    with pytest.raises(OptionRegistrationError, match="itself"):
        CommandLineParser().add_option("--a", "a", mutually_exclusive_with=["--a"])


def test_check_references_reports_unregistered_targets() -> None:
    registry = OptionRegistry()
    registry.add("--a", "a", mutually_exclusive_with=["--b", "--c"])
    registry.add("--b", "b")

    with pytest.raises(OptionRegistrationError, match="--c"):
        registry.check_references()


def test_resolve_returns_owner_or_none() -> None:
    registry = OptionRegistry()
    option = registry.add("--file", "File", ["-f"])

    assert registry.resolve("-f") is option
    assert registry.resolve("--fil") is None


def test_program_name_defaults_to_placeholder() -> None:
    assert CommandLineParser().program_name == "[program]"
    assert CommandLineParser("tool").program_name == "tool"
