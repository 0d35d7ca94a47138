"""ngfmt Printer core: main Printer class and entry points.

The Printer turns a markup tree into canonical template text. Uses a
mixin-based design: elements/text/comments in ElementPrintingMixin,
child sequences and control-flow nesting in BlockSequenceMixin.

Design Principles:
1. **Total**: every well-formed tree prints; malformed directive text
   and stray closers degrade instead of raising
2. **Re-entrant**: no per-call state on the Printer; block stacks and
   depth are locals of each call
3. **O(1) dispatch**: dict-based node type → handler lookup

Pipeline:
    host parser → tree (Root) → Printer.format_root() → text

"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from typing import Any

from ngfmt.environment.config import DEFAULT_OPTIONS, FormatOptions
from ngfmt.environment.exceptions import (
    ErrorCode,
    NestingDepthError,
    TreeShapeError,
)
from ngfmt.environment.loaders import extract_doctype, tree_from_dict
from ngfmt.nodes import Element, Node, Root
from ngfmt.printer.blocks import BlockSequenceMixin
from ngfmt.printer.elements import ElementPrintingMixin

logger = logging.getLogger(__name__)


class Printer(ElementPrintingMixin, BlockSequenceMixin):
    """Print markup trees as canonical template text.

    A Printer holds only its immutable options, so one instance can be
    shared freely, including across threads.

    Attributes:
        options: FormatOptions in effect

    Node Dispatch:
        ```python
        dispatch = {
            "Element": self._print_element,
            "Text": self._print_text,
            "Comment": self._print_comment,
            "Root": self._print_root,
        }
        handler = dispatch[type(node).__name__]
        ```

    Example:
            >>> from ngfmt.nodes import Attribute, Element, Root, Text
            >>> tree = Root(children=(
            ...     Text("@if (user) {"),
            ...     Element("b", children=(Text("{{user.name}}"),)),
            ...     Text("}"),
            ... ))
            >>> print(Printer().format_root(tree))
            @if (user) {
              <b>
                {{ user.name }}
              </b>
            }

    """

    __slots__ = ("_node_dispatch", "_options")

    def __init__(self, options: FormatOptions | None = None):
        self._options = options or DEFAULT_OPTIONS
        self._node_dispatch: dict[str, Callable[[Any, str, int], str]] = {
            "Element": self._print_element,
            "Text": self._print_text,
            "Comment": self._print_comment,
            "Root": self._print_root,
        }

    @property
    def options(self) -> FormatOptions:
        return self._options

    def format(self, node: Node, indent: str | None = None) -> str:
        """Format a single node.

        Args:
            node: Element, Text, Comment or Root
            indent: Starting indent (defaults to options.base_indent)

        Returns:
            Formatted text; empty for blank text nodes

        Raises:
            TreeShapeError: node is not a markup node
            NestingDepthError: elements nest deeper than options.max_depth
        """
        if indent is None:
            indent = self._options.base_indent
        return self._format_node(node, indent, 0)

    def format_root(self, root: Root, indent: str | None = None) -> str:
        """Format a whole document.

        The doctype, when present, is emitted verbatim on the first line.

        Raises:
            TreeShapeError: root is not a Root
        """
        if not isinstance(root, Root):
            raise TreeShapeError(
                f"Cannot format {type(root).__name__} as a document, expected a root node",
                code=ErrorCode.INVALID_FIELD,
            )
        return self.format(root, indent)

    def _format_node(self, node: Node, indent: str, depth: int) -> str:
        handler = self._node_dispatch.get(type(node).__name__)
        if handler is None:
            raise TreeShapeError(
                f"Cannot print {type(node).__name__}",
                code=ErrorCode.UNKNOWN_NODE_TYPE,
            )
        if isinstance(node, Element) and depth > self._options.max_depth:
            raise NestingDepthError(depth, self._options.max_depth, node.name)
        return handler(node, indent, depth)

    def _print_root(self, node: Root, indent: str, depth: int) -> str:
        lines = self._print_sequence(node.children, indent, depth)
        logger.debug("Formatted %d top-level node(s) into %d line(s)", len(node.children), len(lines))
        body = "\n".join(lines)
        if node.doctype:
            return f"{node.doctype}\n{body}"
        return body


def format_tree(root: Root, options: FormatOptions | None = None) -> str:
    """Format a parsed document tree.

    Example:
        >>> format_tree(Root(children=(Element("br"),)))
        '<br>'
    """
    return Printer(options).format_root(root)


def format_source(
    source: str,
    parse: Callable[[str], Root | Mapping[str, Any]],
    options: FormatOptions | None = None,
) -> str:
    """Parse source with a host parser and format the result.

    The host parser may return a Root or its JSON-like form (see
    `ngfmt.environment.loaders`). A leading doctype is taken from the
    source text when the tree does not carry one.

    Args:
        source: Template text
        parse: Host parser callable
        options: Printer options

    Raises:
        TreeShapeError: parser output is not a document tree
    """
    tree = parse(source)
    if isinstance(tree, Mapping):
        tree = tree_from_dict(tree)
    if not isinstance(tree, Root):
        raise TreeShapeError(
            f"Parser returned {type(tree).__name__}, expected a root node",
            code=ErrorCode.INVALID_FIELD,
        )

    if tree.doctype is None:
        doctype = extract_doctype(source)
        if doctype:
            tree = dataclasses.replace(tree, doctype=doctype)
    return Printer(options).format_root(tree)
