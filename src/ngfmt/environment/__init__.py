"""Options, errors and host-boundary helpers for ngfmt."""

from ngfmt.environment.config import DEFAULT_OPTIONS, FormatOptions
from ngfmt.environment.exceptions import (
    ErrorCode,
    FormatterError,
    InvalidOptionsError,
    NestingDepthError,
    SourceSnippet,
    TreeShapeError,
    build_source_snippet,
)
from ngfmt.environment.loaders import extract_doctype, tree_from_dict, tree_from_json

__all__ = [
    "DEFAULT_OPTIONS",
    "ErrorCode",
    "FormatOptions",
    "FormatterError",
    "InvalidOptionsError",
    "NestingDepthError",
    "SourceSnippet",
    "TreeShapeError",
    "build_source_snippet",
    "extract_doctype",
    "tree_from_dict",
    "tree_from_json",
]
