# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from cliopts import CommandLineParser

DEMO_DECLARATIONS = """
program = "demo"

[[option]]
name = "--file"
description = "Output file"
aliases = ["-f"]

[[option]]
name = "--verbose"
description = "Chatty output"
aliases = ["-v"]

[[option]]
name = "--stdout"
description = "Write to standard output"
mutually_exclusive_with = ["--file"]
""".lstrip()


@pytest.fixture
def parser() -> CommandLineParser:
    """Return a parser with file/verbose/stdout options registered."""
    cli = CommandLineParser("demo")
    cli.add_option("--file", "Output file", ["-f"])
    cli.add_option("--verbose", "Chatty output", ["-v"])
    cli.add_option("--stdout", "Write to standard output", mutually_exclusive_with=["--file"])
    return cli


@pytest.fixture
def declarations_file(tmp_path: Path) -> Path:
    """Write the demo declaration document and return its path."""
    path = tmp_path / "options.toml"
    path.write_text(DEMO_DECLARATIONS, encoding="utf-8")
    return path
