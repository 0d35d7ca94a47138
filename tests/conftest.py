"""Pytest configuration and fixtures for ngfmt tests."""

import pytest

from ngfmt import Attribute, Element, FormatOptions, Printer, Root, Text
from ngfmt.environment import terminal


@pytest.fixture
def printer():
    """Create a Printer with default options."""
    return Printer()


@pytest.fixture
def indented_printer():
    """Create a Printer whose output starts four spaces in."""
    return Printer(FormatOptions(base_indent="    "))


@pytest.fixture
def no_colors(monkeypatch):
    """Disable terminal colors so messages compare as plain text."""
    monkeypatch.setattr(terminal, "_USE_COLORS", False)


def el(name: str, *children, attrs=None) -> Element:
    """Build an Element; string children become Text nodes.

    ``attrs`` maps names to values, with None for valueless attributes.
    """
    return Element(
        name=name,
        attrs=tuple(Attribute(k, v) for k, v in (attrs or {}).items()),
        children=tuple(Text(c) if isinstance(c, str) else c for c in children),
    )


def doc(*children, doctype=None) -> Root:
    """Build a Root; string children become Text nodes."""
    return Root(
        children=tuple(Text(c) if isinstance(c, str) else c for c in children),
        doctype=doctype,
    )


def lines(*parts: str) -> str:
    """Join expected output lines."""
    return "\n".join(parts)
