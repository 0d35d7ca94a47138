"""Directive and interpolation classification for text fragments.

Pure predicates over a single fragment. They are meant to run on output
of the segmenter, never on raw unsplit text nodes.

Example:
    >>> is_control_flow_opener("@if (user) {")
    True
    >>> is_chain_continuation("@else   if (admin) {")
    True
    >>> is_interpolation_only("  {{ user.name }} ")
    True

"""

from __future__ import annotations

import re

from ngfmt.utils.constants import (
    BLOCK_OPEN,
    CHAIN_KEYWORDS,
    DIRECTIVE_KEYWORDS,
    INTERPOLATION_CLOSE,
    INTERPOLATION_OPEN,
)

_WHITESPACE_RE = re.compile(r"\s+")


def keyword_pattern(keywords: tuple[str, ...]) -> str:
    """Build a regex alternation for keywords, longest phrases first."""
    return "|".join(re.escape(kw) for kw in sorted(keywords, key=len, reverse=True))


_OPENER_RE = re.compile(rf"^@(?:{keyword_pattern(DIRECTIVE_KEYWORDS)})\b")
_CHAIN_RE = re.compile(rf"^@(?:{keyword_pattern(CHAIN_KEYWORDS)})\b")

# {{ expr }} with the expression captured; may span lines
INTERPOLATION_RE = re.compile(
    re.escape(INTERPOLATION_OPEN) + r"(?P<expr>.*?)" + re.escape(INTERPOLATION_CLOSE),
    re.DOTALL,
)
_SINGLE_INTERPOLATION_RE = re.compile(
    re.escape(INTERPOLATION_OPEN)
    + r"(?:(?!"
    + re.escape(INTERPOLATION_CLOSE)
    + r").)*"
    + re.escape(INTERPOLATION_CLOSE),
    re.DOTALL,
)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_interpolation(expr: str) -> str:
    """Rewrap an interpolation expression as ``{{ expr }}``."""
    return f"{INTERPOLATION_OPEN} {normalize_whitespace(expr)} {INTERPOLATION_CLOSE}"


def normalize_interpolations(text: str) -> str:
    """Normalize every interpolation span inside a larger text."""
    return INTERPOLATION_RE.sub(lambda m: normalize_interpolation(m.group("expr")), text)


def is_control_flow_opener(text: str) -> bool:
    """Check for a block-opening directive such as ``@if (cond) {``.

    Braces inside ``{{ }}`` do not count: ``@if (a) {{ x }}`` is text.
    """
    normalized = normalize_whitespace(text)
    if _OPENER_RE.match(normalized) is None:
        return False
    return BLOCK_OPEN in INTERPOLATION_RE.sub("", normalized)


def is_chain_continuation(text: str) -> bool:
    """Check for a directive that attaches to a preceding closer (``} @else {``)."""
    return _CHAIN_RE.match(normalize_whitespace(text)) is not None


def is_interpolation_only(text: str) -> bool:
    """Check that text is exactly one ``{{ }}`` span and nothing else."""
    return _SINGLE_INTERPOLATION_RE.fullmatch(text.strip()) is not None
