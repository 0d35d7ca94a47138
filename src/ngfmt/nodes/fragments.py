"""Text fragments produced by segmenting a Text node.

Fragments are derived values, never part of the input tree.
"""

from __future__ import annotations

from dataclasses import dataclass

from ngfmt.utils.constants import BLOCK_CLOSE


@dataclass(frozen=True, slots=True)
class PlainText:
    """Text run, with any interpolation already normalized."""

    value: str


@dataclass(frozen=True, slots=True)
class DirectiveOpen:
    """Control-flow header up to and including its brace: @if (a) {"""

    value: str


@dataclass(frozen=True, slots=True)
class BlockClose:
    """Block closer: }"""

    value: str = BLOCK_CLOSE


TextFragment = PlainText | DirectiveOpen | BlockClose
