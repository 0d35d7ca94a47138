"""Text segmentation for the printer.

A single Text node can carry several logical lines of a template::

    Hello {{ user.name }} @if (user.admin) { <b>admin</b> }

The segmenter splits such a value into typed fragments in one pass:

- `PlainText`: text runs, with every ``{{ }}`` span normalized in place
- `DirectiveOpen`: ``@keyword ... {`` headers (through the first brace)
- `BlockClose`: a lone ``}``

Interpolation spans are matched before closers and directive headers, so
braces inside ``{{ }}`` never split the text.

Thread-Safety:
Module-level patterns are compiled once and never mutated.

"""

from __future__ import annotations

import re

from ngfmt.nodes.fragments import BlockClose, DirectiveOpen, PlainText, TextFragment
from ngfmt.text.directives import (
    keyword_pattern,
    normalize_interpolation,
    normalize_interpolations,
)
from ngfmt.utils.constants import HEADER_KEYWORDS

# Leftmost match wins; at a given position an interpolation is tried first.
# A directive header may contain interpolation spans and line breaks, and
# ends at the first brace that does not start one.
_TOKEN_RE = re.compile(
    r"(?P<interpolation>\{\{(?P<expr>.*?)\}\})"
    r"|(?P<directive>@(?:"
    + keyword_pattern(HEADER_KEYWORDS)
    + r")\b(?:\{\{(?:(?!\}\}).)*\}\}|[^{}])*\{(?!\{))"
    r"|(?P<close>\})",
    re.DOTALL,
)


def segment_text(value: str | None) -> list[TextFragment]:
    """Split a raw text value into ordered, trimmed fragments.

    Args:
        value: Raw Text node value (may be None)

    Returns:
        Fragments in source order. Empty pieces are dropped, so a
        whitespace-only value yields an empty list.

    Example:
        >>> segment_text("@if (a) { {{b}} }")
        [DirectiveOpen(value='@if (a) {'), PlainText(value='{{ b }}'), BlockClose(value='}')]

    """
    if not value:
        return []

    fragments: list[TextFragment] = []
    pending: list[str] = []

    def flush() -> None:
        text = "".join(pending).strip()
        pending.clear()
        if text:
            fragments.append(PlainText(text))

    pos = 0
    for match in _TOKEN_RE.finditer(value):
        pending.append(value[pos : match.start()])
        pos = match.end()

        if match.group("interpolation") is not None:
            pending.append(normalize_interpolation(match.group("expr")))
            continue

        flush()
        directive = match.group("directive")
        if directive is not None:
            fragments.append(DirectiveOpen(normalize_interpolations(directive).strip()))
        else:
            fragments.append(BlockClose())

    pending.append(value[pos:])
    flush()
    return fragments
