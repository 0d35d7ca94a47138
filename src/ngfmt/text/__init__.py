"""Text segmentation and fragment classification."""

from __future__ import annotations

from ngfmt.text.directives import (
    is_chain_continuation,
    is_control_flow_opener,
    is_interpolation_only,
    normalize_interpolation,
    normalize_whitespace,
)
from ngfmt.text.segmenter import segment_text

__all__ = [
    "is_chain_continuation",
    "is_control_flow_opener",
    "is_interpolation_only",
    "normalize_interpolation",
    "normalize_whitespace",
    "segment_text",
]
