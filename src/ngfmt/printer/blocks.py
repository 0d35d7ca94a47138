"""Control-flow block tracking for a child sequence.

Directives live inside text nodes, so the tree has no node for an
``@if`` block. Nesting is recovered while walking one parent's children:
each opener pushes a Block, each ``}`` pops one. Every formatting call
owns a fresh BlockStack; stacks are never shared between siblings,
levels or calls.

Chained directives keep the indent of the block they continue::

    @if (a) {
      one
    } @else if (b) {
      two
    } @else {
      three
    }

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ngfmt.nodes import BlockClose, Node, Text, TextFragment
from ngfmt.printer.control_flow import format_control_flow
from ngfmt.text import is_chain_continuation, is_control_flow_opener, segment_text
from ngfmt.utils.constants import BLOCK_CLOSE, INDENT_UNIT

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Block:
    """An open control-flow block.

    Attributes:
        directive: Header text that opened the block
        indent: Indent of the opener and its closer
    """

    directive: str
    indent: str

    @property
    def content_indent(self) -> str:
        """Indent of the block body: always one unit deeper."""
        return self.indent + INDENT_UNIT


class BlockStack:
    """Stack of open blocks for a single child sequence."""

    __slots__ = ("_blocks",)

    def __init__(self) -> None:
        self._blocks: list[Block] = []

    def __len__(self) -> int:
        return len(self._blocks)

    def __bool__(self) -> bool:
        return bool(self._blocks)

    def push(self, block: Block) -> None:
        self._blocks.append(block)

    def pop(self) -> Block:
        return self._blocks.pop()

    @property
    def top(self) -> Block | None:
        return self._blocks[-1] if self._blocks else None

    def current_indent(self, base_indent: str) -> str:
        """Indent for content at this point: the open block's body, else base."""
        top = self.top
        return top.content_indent if top is not None else base_indent


class BlockSequenceMixin:
    """Mixin that prints a child sequence while tracking control-flow blocks.

    Shared by element bodies and the document root.

    """

    # ─────────────────────────────────────────────────────────────────────────
    # Cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        # From Printer core
        def _format_node(self, node: Node, indent: str, depth: int) -> str: ...

    def _print_sequence(self, nodes: Sequence[Node], base_indent: str, depth: int) -> list[str]:
        """Format nodes into output lines with a fresh block stack.

        Blank results are dropped. Blocks still open at the end stay
        unclosed in the output.
        """
        stack = BlockStack()
        lines: list[str] = []

        for node in nodes:
            if isinstance(node, Text):
                self._print_fragments(segment_text(node.value), stack, base_indent, depth, lines)
            else:
                self._emit(lines, self._format_node(node, stack.current_indent(base_indent), depth))

        if stack:
            logger.debug("%d control-flow block(s) left open at end of sequence", len(stack))
        return lines

    def _print_fragments(
        self,
        fragments: list[TextFragment],
        stack: BlockStack,
        base_indent: str,
        depth: int,
        lines: list[str],
    ) -> None:
        i = 0
        while i < len(fragments):
            fragment = fragments[i]

            if isinstance(fragment, BlockClose):
                if not stack:
                    logger.debug("Dropping block closer with no open block")
                else:
                    block = stack.pop()
                    following = fragments[i + 1] if i + 1 < len(fragments) else None
                    if following is not None and is_chain_continuation(following.value):
                        continuation = format_control_flow(following.value)
                        lines.append(f"{block.indent}{BLOCK_CLOSE} {continuation}")
                        stack.push(Block(following.value, block.indent))
                        i += 1
                    else:
                        lines.append(block.indent + BLOCK_CLOSE)

            elif is_control_flow_opener(fragment.value):
                indent = stack.current_indent(base_indent)
                lines.append(format_control_flow(fragment.value, indent))
                stack.push(Block(fragment.value, indent))

            else:
                text = Text(fragment.value)
                self._emit(lines, self._format_node(text, stack.current_indent(base_indent), depth))

            i += 1

    @staticmethod
    def _emit(lines: list[str], formatted: str) -> None:
        if formatted.strip():
            lines.append(formatted)
