# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for loading option declarations from TOML."""

from __future__ import annotations

from pathlib import Path

import pytest

from cliopts import ParserSettings
from cliopts.declarations import (
    DeclarationError,
    build_parser,
    load_declarations,
    parse_declarations,
)


def test_load_declarations_reads_options_in_order(declarations_file: Path) -> None:
    document = load_declarations(declarations_file)

    assert document.program == "demo"
    assert [entry.name for entry in document.options] == ["--file", "--verbose", "--stdout"]
    assert document.options[0].aliases == ("-f",)
    assert document.options[2].mutually_exclusive_with == ("--file",)


def test_build_parser_registers_every_declaration(declarations_file: Path) -> None:
    parser = build_parser(load_declarations(declarations_file))

    assert parser.program_name == "demo"
    assert parser.parse(["-f", "out.txt"]).ok
    assert parser.get_option_value("--file") == "out.txt"


def test_program_override_wins_over_document(declarations_file: Path) -> None:
    settings = ParserSettings(program_name="from-settings")
    parser = build_parser(load_declarations(declarations_file), settings, program_name="explicit")

    assert parser.program_name == "explicit"


def test_settings_program_used_when_document_has_none() -> None:
    document = parse_declarations({"option": [{"name": "--a"}]})
    parser = build_parser(document, ParserSettings(program_name="from-settings"))

    assert parser.program_name == "from-settings"
    assert parser.get_option_description("--a") == ""


def test_missing_file_raises_declaration_error(tmp_path: Path) -> None:
    with pytest.raises(DeclarationError, match="Unable to read"):
        load_declarations(tmp_path / "absent.toml")


def test_invalid_toml_raises_declaration_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[[option]\nname = ", encoding="utf-8")

    with pytest.raises(DeclarationError, match="Invalid TOML"):
        load_declarations(path)


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(DeclarationError, match="Invalid option declarations"):
        parse_declarations({"option": [{"name": "--a", "default": "x"}]})


def test_empty_name_is_rejected() -> None:
    with pytest.raises(DeclarationError):
        parse_declarations({"option": [{"name": ""}]})


def test_duplicate_declaration_surfaces_as_declaration_error() -> None:
    document = parse_declarations({"option": [{"name": "--a"}, {"name": "--a"}]})

    with pytest.raises(DeclarationError, match="already registered"):
        build_parser(document)


def test_undeclared_exclusivity_target_is_rejected() -> None:
    document = parse_declarations({"option": [{"name": "--a", "mutually_exclusive_with": ["--b"]}]})

    with pytest.raises(DeclarationError, match="unregistered"):
        build_parser(document)
