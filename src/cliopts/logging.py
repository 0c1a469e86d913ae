# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing output helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.text import Text

from .console import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Render ``msg`` on the selected stream using shared styling helpers.

    Args:
        msg: Message text to print.
        style: Rich style name applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        stderr: ``True`` to write to the error stream.
    """

    color_enabled = detect_tty(stderr=stderr) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message on stderr.

    Without emoji the line reads ``Error: <msg>``; with emoji the prefix is
    replaced by a cross mark.
    """

    prefix = emoji("❌ ", use_emoji) or "Error: "
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color, stderr=True)


def emit_usage(usage: str, *, stderr: bool = False) -> None:
    """Write pre-rendered usage text verbatim, without markup or wrapping.

    Args:
        usage: Newline-terminated usage block.
        stderr: ``True`` to write to the error stream.
    """

    console = get_console_manager().get(color=False, emoji=False, stderr=stderr)
    console.out(usage, end="", highlight=False)


__all__ = ["emit_usage", "emoji", "fail"]
