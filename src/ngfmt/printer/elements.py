"""Element, text and comment printing.

Layout rules:

1. No content and at most one attribute: one line::

    <button (click)="go()"></button>
    <br>

2. Several attributes, no content: attributes at one unit, closing tag
   on its own line (void elements get no closing tag)::

    <app-x
      [title]="t"
      class="c">
    </app-x>

3. Several attributes with content: attributes at two units so they
   stand apart from the children at one unit::

    <app-x
        [title]="t"
        class="c">
      Hi
    </app-x>

4. Comments are emitted exactly as written.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ngfmt.nodes import Comment, Element, Node, Text
from ngfmt.printer.attributes import format_attributes
from ngfmt.printer.control_flow import format_control_flow
from ngfmt.printer.interpolation import format_interpolation
from ngfmt.text import is_control_flow_opener, is_interpolation_only
from ngfmt.utils.constants import INDENT_UNIT, SELF_CLOSING_TAGS


def is_self_closing(name: str) -> bool:
    """Void elements never take a closing tag."""
    return name in SELF_CLOSING_TAGS


def has_meaningful_content(children: Sequence[Node]) -> bool:
    """True when any child is non-text or text with non-whitespace value."""
    for child in children:
        if not isinstance(child, Text):
            return True
        if child.value and child.value.strip():
            return True
    return False


class ElementPrintingMixin:
    """Mixin for printing elements, text and comments.

    Host attributes and cross-mixin dependencies are declared via inline
    TYPE_CHECKING blocks.

    """

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From BlockSequenceMixin
        def _print_sequence(
            self, nodes: Sequence[Node], base_indent: str, depth: int
        ) -> list[str]: ...

    def _print_comment(self, node: Comment, indent: str, depth: int) -> str:
        return f"{indent}<!--{node.value}-->"

    def _print_text(self, node: Text, indent: str, depth: int) -> str:
        """Print a single text fragment as a directive, interpolation or text."""
        if not node.value:
            return ""
        trimmed = node.value.strip()
        if not trimmed:
            return ""

        if is_control_flow_opener(trimmed):
            return format_control_flow(trimmed, indent)
        if is_interpolation_only(trimmed):
            return format_interpolation(trimmed, indent)
        return f"{indent}{trimmed}"

    def _print_element(self, node: Element, indent: str, depth: int) -> str:
        name = node.name
        if not name:
            return ""

        attrs = node.attrs
        has_attributes = len(attrs) > 0
        has_single_attribute = len(attrs) == 1
        has_content = has_meaningful_content(node.children)
        single_line = not has_content and (has_single_attribute or not has_attributes)
        self_closing = is_self_closing(name)

        result = f"{indent}<{name}"
        if has_single_attribute:
            result += f" {format_attributes(attrs)}"
        elif has_attributes:
            # With content: two units. Without: one unit.
            attr_indent = indent + (INDENT_UNIT * 2 if has_content else INDENT_UNIT)
            result += "\n" + format_attributes(attrs, attr_indent)
        result += ">"

        if single_line:
            if not self_closing:
                result += f"</{name}>"
            return result

        if not has_content:
            if self_closing:
                return result
            return f"{result}\n{indent}</{name}>"

        child_lines = self._print_sequence(node.children, indent + INDENT_UNIT, depth + 1)
        return f"{result}\n" + "\n".join(child_lines) + f"\n{indent}</{name}>"
