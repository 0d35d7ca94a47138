"""Markup nodes: elements, text, comments and the document root."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ngfmt.nodes.base import Node


@dataclass(frozen=True, slots=True)
class Attribute:
    """Element attribute: name="value", or a bare name when value is None."""

    name: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class Element(Node):
    """Element: <name attrs...>children</name>"""

    name: str
    attrs: Sequence[Attribute] = ()
    children: Sequence[Node] = ()


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Raw text between tags.

    May hold several logical fragments at once: plain text, {{ }}
    interpolation, @directive openers and } closers.
    """

    value: str | None = None


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Comment: <!--value--> (value kept byte-for-byte)"""

    value: str


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Document root with an optional leading <!DOCTYPE ...> declaration."""

    children: Sequence[Node] = ()
    doctype: str | None = None
