"""Exceptions for ngfmt.

Printing itself never fails on template content: malformed directives,
empty text and stray closers all degrade to some output. Errors are
raised only at the boundaries, when the host hands over a tree that
cannot be printed or options that make no sense.

Exception Hierarchy:
FormatterError (base)
├── TreeShapeError         # Host tree data is malformed
├── NestingDepthError      # Tree nests deeper than max_depth
└── InvalidOptionsError    # FormatOptions validation failed

Example:
    ```
    NGF-TRE-001: Unknown node type 'elment' at root.children[1]. Did you mean 'element'?
    ```

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ngfmt.environment import terminal

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(Enum):
    """Searchable error codes.

    Format: NGF-{CATEGORY}-{NUMBER}
    Categories: TRE (tree data), RUN (printing), CFG (options)
    """

    # Tree data errors (NGF-TRE-xxx)
    UNKNOWN_NODE_TYPE = "NGF-TRE-001"
    MISSING_FIELD = "NGF-TRE-002"
    INVALID_JSON = "NGF-TRE-003"
    INVALID_FIELD = "NGF-TRE-004"

    # Printing errors (NGF-RUN-xxx)
    NESTING_DEPTH = "NGF-RUN-001"

    # Option errors (NGF-CFG-xxx)
    INVALID_OPTION = "NGF-CFG-001"

    @property
    def category(self) -> str:
        """Error category (e.g., 'tree', 'runtime', 'config')."""
        prefix = self.value.split("-")[1]
        return {
            "TRE": "tree",
            "RUN": "runtime",
            "CFG": "config",
        }.get(prefix, "unknown")


# ---------------------------------------------------------------------------
# Source snippets
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SourceSnippet:
    """Lines of host input around an error position.

    Attributes:
        lines: (line_number, content) pairs around the error.
        error_line: 1-based line of the error.
        column: Optional 0-based column for a caret pointer.
    """

    lines: tuple[tuple[int, str], ...]
    error_line: int
    column: int | None = None

    def format(self) -> str:
        parts: list[str] = [terminal.dim_text("   |")]
        for lineno, content in self.lines:
            parts.append(
                terminal.format_source_line(lineno, content, is_error=lineno == self.error_line)
            )
        if self.column is not None:
            caret = " " * self.column + "^"
            parts.append(f"{terminal.dim_text('   |')} {terminal.error_line(caret)}")
        parts.append(terminal.dim_text("   |"))
        return "\n".join(parts)


def build_source_snippet(
    source: str,
    error_line: int,
    *,
    context_lines: int = 2,
    column: int | None = None,
) -> SourceSnippet:
    """Build a SourceSnippet from host input text.

    Args:
        source: Full input text.
        error_line: 1-based line number of the error.
        context_lines: Lines to show before and after the error line.
        column: Optional column offset for the caret.
    """
    all_lines = source.splitlines()
    start = max(0, error_line - 1 - context_lines)
    end = min(len(all_lines), error_line + context_lines)
    lines = tuple((i + 1, all_lines[i]) for i in range(start, end))
    return SourceSnippet(lines=lines, error_line=error_line, column=column)


def format_node_path(path: Sequence[str | int]) -> str:
    """Render a location inside host tree data.

    Example:
        >>> format_node_path(["children", 2, "attrs", 0])
        'root.children[2].attrs[0]'
    """
    rendered = "root"
    for step in path:
        rendered += f"[{step}]" if isinstance(step, int) else f".{step}"
    return rendered


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FormatterError(Exception):
    """Base exception for all ngfmt errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format the error as a short terminal diagnostic."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = terminal.format_error_header(self.code.value, header)
        return header


class TreeShapeError(FormatterError):
    """Host tree data cannot be turned into nodes.

    Raised by the tree loaders for unknown node types, missing or
    mistyped fields, and undecodable JSON. ``path`` points at the
    offending value inside the data.
    """

    code: ErrorCode | None = ErrorCode.UNKNOWN_NODE_TYPE

    def __init__(
        self,
        message: str,
        *,
        path: Sequence[str | int] = (),
        code: ErrorCode | None = None,
        suggestion: str | None = None,
        source_snippet: SourceSnippet | None = None,
    ):
        self.message = message
        self.path = tuple(path)
        if code is not None:
            self.code = code
        self.suggestion = suggestion
        self.source_snippet = source_snippet
        super().__init__(self._format_message())

    @property
    def location(self) -> str:
        return format_node_path(self.path)

    def _format_message(self) -> str:
        msg = f"{self.message} at {self.location}"
        if self.suggestion:
            msg += f". Did you mean '{terminal.suggestion(self.suggestion)}'?"
        return msg

    def format_compact(self) -> str:
        parts = [
            terminal.format_error_header(
                self.code.value if self.code else None,
                self._format_message(),
            )
        ]
        if self.source_snippet:
            parts.append(self.source_snippet.format())
        return "\n".join(parts)


class NestingDepthError(FormatterError):
    """The tree nests elements deeper than FormatOptions.max_depth.

    Printing is recursive, so an unbounded tree would otherwise surface
    as a bare RecursionError.
    """

    code: ErrorCode | None = ErrorCode.NESTING_DEPTH

    def __init__(self, depth: int, limit: int, element: str | None = None):
        self.depth = depth
        self.limit = limit
        self.element = element
        msg = f"Element nesting depth {depth} exceeds max_depth={limit}"
        if element:
            msg += f" at <{element}>"
        super().__init__(msg)

    def format_compact(self) -> str:
        parts = [
            terminal.format_error_header(self.code.value if self.code else None, str(self)),
            f"  {terminal.hint('Hint:')} Raise FormatOptions(max_depth=...) for deeply nested templates",
        ]
        return "\n".join(parts)


class InvalidOptionsError(FormatterError, ValueError):
    """A FormatOptions field has an unusable value."""

    code: ErrorCode | None = ErrorCode.INVALID_OPTION

    def __init__(self, option: str, message: str):
        self.option = option
        super().__init__(f"Invalid option '{option}': {message}")
