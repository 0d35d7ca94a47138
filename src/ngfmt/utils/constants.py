"""Lexical constants shared by the segmenter, classifier and printer.

These values define the canonical output. Changing any of them changes
what every formatted template looks like.
"""

from __future__ import annotations

# One level of nesting. Attribute blocks of elements with content use two.
INDENT_UNIT = "  "

INTERPOLATION_OPEN = "{{"
INTERPOLATION_CLOSE = "}}"

BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

# Void elements: never given a closing tag
# Source: WHATWG HTML Living Standard, "void elements"
SELF_CLOSING_TAGS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Keywords that open a control-flow block: @if (...) {
DIRECTIVE_KEYWORDS: tuple[str, ...] = (
    "if",
    "for",
    "switch",
    "defer",
    "else if",
    "else",
    "case",
    "default",
    "error",
)

# Keywords that attach to the preceding closer: } @else {
CHAIN_KEYWORDS: tuple[str, ...] = (
    "else if",
    "else",
    "placeholder",
    "loading",
    "error",
)

# Headers the segmenter splits on. Chain-only keywords are included so the
# body text after "} @placeholder {" stays a separate fragment.
HEADER_KEYWORDS: tuple[str, ...] = tuple(dict.fromkeys(DIRECTIVE_KEYWORDS + CHAIN_KEYWORDS))
