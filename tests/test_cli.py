# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the ``usage`` and ``parse`` commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from cliopts.cli.app import app


def test_usage_command_prints_usage(declarations_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["usage", str(declarations_file)])

    assert result.exit_code == 0
    assert result.stdout.startswith("Usage: demo [options]\nOptions:\n")
    assert "--file, -f," in result.stdout


def test_usage_command_program_override(declarations_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["usage", str(declarations_file), "--program", "other"])

    assert result.exit_code == 0
    assert result.stdout.startswith("Usage: other [options]")


def test_parse_command_outputs_json(declarations_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", str(declarations_file), "--json", "--", "--file", "out.txt", "-v"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["--file"] == {"set": True, "value": "out.txt"}
    assert payload["--verbose"] == {"set": True, "value": ""}
    assert payload["--stdout"] == {"set": False, "value": ""}


def test_parse_command_renders_table(declarations_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", str(declarations_file), "--", "--verbose"])

    assert result.exit_code == 0
    assert "--verbose" in result.stdout
    assert "yes" in result.stdout


def test_parse_command_help_token_prints_usage(declarations_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", str(declarations_file), "--", "--file", "x", "-h"])

    assert result.exit_code == 0
    assert "Usage: demo [options]" in result.stdout


def test_parse_command_reports_mutual_exclusion(declarations_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", str(declarations_file), "--", "--file", "--stdout"])

    assert result.exit_code == 1
    assert 'Options "--file" and "--stdout" are mutually exclusive.' in result.output
    assert "Usage: demo [options]" in result.output


def test_parse_command_reports_unrecognized_option(declarations_file: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", str(declarations_file), "--", "--nope"])

    assert result.exit_code == 1
    assert 'Error: Invalid option "--nope".' in result.output


def test_parse_command_rejects_invalid_declarations(tmp_path: Path) -> None:
    runner = CliRunner()
    path = tmp_path / "bad.toml"
    path.write_text('[[option]]\nname = "--a"\nmutually_exclusive_with = ["--ghost"]\n', encoding="utf-8")

    result = runner.invoke(app, ["parse", str(path)])

    assert result.exit_code == 2
    assert "--ghost" in result.output


def test_parse_command_missing_required(tmp_path: Path) -> None:
    runner = CliRunner()
    path = tmp_path / "required.toml"
    path.write_text('[[option]]\nname = "--req"\ndescription = "needed"\nrequired = true\n', encoding="utf-8")

    result = runner.invoke(app, ["parse", str(path)])

    assert result.exit_code == 1
    assert "--req is a required option." in result.output
