"""Base node class for the markup tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all markup tree nodes.

    Nodes are built once by the host parser (or by
    `ngfmt.environment.loaders.tree_from_dict`) and are never mutated by
    the printer, so one tree can be formatted concurrently.

    """
