"""Node definitions for the markup tree.

The tree is supplied by a host parser; fragments are derived by the
segmenter while printing.
"""

from __future__ import annotations

from ngfmt.nodes.base import Node
from ngfmt.nodes.fragments import BlockClose, DirectiveOpen, PlainText, TextFragment
from ngfmt.nodes.markup import Attribute, Comment, Element, Root, Text

__all__ = [
    "Attribute",
    "BlockClose",
    "Comment",
    "DirectiveOpen",
    "Element",
    "Node",
    "PlainText",
    "Root",
    "Text",
    "TextFragment",
]
