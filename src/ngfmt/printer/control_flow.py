"""Control-flow header formatting.

Renders one directive line with normalized spacing::

    @if(user.isAdmin  ){      ->  @if (user.isAdmin) {
    @else   if (x){           ->  @else if (x) {
    @for (item of items; track item.id) {

Text that does not have the ``@keyword ... {`` shape is emitted trimmed
but otherwise untouched; this function never raises.
"""

from __future__ import annotations

import logging
import re

from ngfmt.text.directives import normalize_whitespace
from ngfmt.utils.constants import BLOCK_OPEN

logger = logging.getLogger(__name__)

# Header through the first brace that is not inside an interpolation
_HEADER_RE = re.compile(r"^(@\w+(?:\{\{(?:(?!\}\}).)*\}\}|[^{])*)\{(?!\{)")
# Keyword (with the "else if" qualifier) and the remaining condition
_PARTS_RE = re.compile(r"^(@\w+(?:\s+if)?)\s*(.*)")


def format_control_flow(text: str, indent: str = "") -> str:
    """Format a directive header at the given indent.

    Args:
        text: Directive fragment, e.g. ``@if ( a ) {``
        indent: Indent string placed before the keyword

    Returns:
        ``indent + keyword [+ " " + condition] + " {"``

    Example:
        >>> format_control_flow("@for(item of items){", "  ")
        '  @for (item of items) {'

    """
    content = text.strip()
    header = _HEADER_RE.match(normalize_whitespace(content))
    if header is None:
        logger.debug("Directive text has no block header, emitting verbatim: %r", content)
        return f"{indent}{content}"

    directive = header.group(1).strip()
    parts = _PARTS_RE.match(directive)
    if parts:
        keyword, condition = parts.groups()
        if condition:
            return f"{indent}{keyword} {condition.strip()} {BLOCK_OPEN}"

    return f"{indent}{directive} {BLOCK_OPEN}"
