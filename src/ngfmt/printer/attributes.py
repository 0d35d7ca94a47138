"""Attribute list formatting.

Layout rules:

1. Single attribute: stays inline with the tag::

    <div class="container">

2. Several attributes: one per line at the indent chosen by the caller.
   Elements without content use one unit, elements with content two::

    <app-element          <div
      [prop]="value"          class="card"
      class="c">              [prop]="value">
    </app-element>          Content
                            </div>

"""

from __future__ import annotations

from collections.abc import Sequence

from ngfmt.nodes import Attribute


def format_attribute(attr: Attribute) -> str:
    """Render ``name`` for valueless attributes, else ``name="value"``."""
    if attr.value is None:
        return attr.name
    return f'{attr.name}="{attr.value}"'


def format_attributes(attrs: Sequence[Attribute], indent: str = "") -> str:
    """Render an attribute list without the surrounding tag characters.

    Args:
        attrs: Attributes in source order
        indent: Indent for each line when there is more than one attribute

    Returns:
        Inline text for a single attribute, else newline-joined lines
    """
    if len(attrs) == 1:
        return format_attribute(attrs[0])
    return "\n".join(f"{indent}{format_attribute(attr)}" for attr in attrs)
