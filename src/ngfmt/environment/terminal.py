"""ANSI coloring for diagnostics and check reports.

Colors are enabled only when stdout is a TTY, unless overridden:
``NO_COLOR`` disables them and ``FORCE_COLOR`` forces them on.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_magenta": "\033[95m",
}

ColorName = Literal[
    "reset", "bold", "dim",
    "red", "green", "yellow", "cyan",
    "bright_red", "bright_green", "bright_magenta",
]

_ANSI_ESCAPE_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    # FORCE_COLOR wins over NO_COLOR
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    """Return True when diagnostics will be colored."""
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap text in ANSI codes for the given colors.

    Returns text unchanged when colors are disabled or none are known.

    Example:
        >>> colorize("NGF-TRE-001", "bright_red", "bold")
        '\033[91m\033[1mNGF-TRE-001\033[0m'  # if colors supported
    """
    if not _USE_COLORS or not colors:
        return text

    prefix = "".join(_COLORS.get(color, "") for color in colors)
    if not prefix:
        return text
    return f"{prefix}{text}{_COLORS['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_ESCAPE_RE.sub("", text)


def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def location(text: str) -> str:
    return colorize(text, "cyan")


def line_number(text: str) -> str:
    return colorize(text, "yellow")


def error_line(text: str) -> str:
    return colorize(text, "bright_red")


def hint(text: str) -> str:
    return colorize(text, "green")


def suggestion(text: str) -> str:
    """Color a 'Did you mean?' candidate."""
    return colorize(text, "bright_green", "bold")


def dim_text(text: str) -> str:
    return colorize(text, "dim")


def diff_line(line: str) -> str:
    """Color one line of a unified diff by its leading marker."""
    if line.startswith(("+++", "---")):
        return colorize(line, "bold")
    if line.startswith("@@"):
        return colorize(line, "bright_magenta")
    if line.startswith("+"):
        return colorize(line, "green")
    if line.startswith("-"):
        return colorize(line, "red")
    return line


def format_error_header(code: str | None, message: str) -> str:
    """Prefix a message with its colored error code, if any."""
    if code:
        return f"{error_code(code)}: {message}"
    return message


def format_source_line(
    lineno: int,
    content: str,
    is_error: bool = False,
) -> str:
    """Render ``>  3 | content`` with the error line highlighted."""
    marker = ">" if is_error else " "
    num_colored = line_number(f"{marker}{lineno:>3}")
    content_colored = error_line(content) if is_error else dim_text(content)
    return f"{num_colored} | {content_colored}"
