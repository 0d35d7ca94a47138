"""Printer package.

The printer package is organized into logical modules:
- control_flow: directive header lines (@if, @for, ...)
- attributes: attribute list layout
- interpolation: {{ }} spacing
- blocks: block stack and child-sequence printing
- elements: element, text and comment layout
- core: Printer host class and entry points
"""

from __future__ import annotations

from ngfmt.printer.attributes import format_attribute, format_attributes
from ngfmt.printer.blocks import Block, BlockStack
from ngfmt.printer.control_flow import format_control_flow
from ngfmt.printer.core import Printer, format_source, format_tree
from ngfmt.printer.elements import has_meaningful_content, is_self_closing
from ngfmt.printer.interpolation import format_interpolation

__all__ = [
    "Block",
    "BlockStack",
    "Printer",
    "format_attribute",
    "format_attributes",
    "format_control_flow",
    "format_interpolation",
    "format_source",
    "format_tree",
    "has_meaningful_content",
    "is_self_closing",
]
