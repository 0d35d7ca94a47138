"""Interpolation formatting: ``{{value}}`` and ``{{   value  }}`` become ``{{ value }}``."""

from __future__ import annotations

from ngfmt.text.directives import normalize_interpolations


def format_interpolation(text: str, indent: str = "") -> str:
    """Normalize every interpolation span in text and prefix the indent.

    Whitespace inside an expression, newlines included, collapses to
    single spaces.
    """
    return indent + normalize_interpolations(text)
