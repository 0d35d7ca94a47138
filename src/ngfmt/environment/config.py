"""Printer options.

Options are an explicit, immutable value handed to the Printer. Nothing
is read from the process environment, so two printers with different
options can run side by side.
"""

from __future__ import annotations

from dataclasses import dataclass

from ngfmt.environment.exceptions import InvalidOptionsError


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Configuration for a Printer.

    The indentation unit is fixed at two spaces; only the starting
    column can be moved.

    Attributes:
        base_indent: Indent applied to every top-level line. Spaces only.
        max_depth: Deepest element nesting the printer will descend into.

    Example:
            >>> FormatOptions(base_indent="    ")  # template embedded in a host file
            >>> FormatOptions(max_depth=500)

    """

    base_indent: str = ""
    max_depth: int = 200

    def __post_init__(self) -> None:
        if self.base_indent.strip(" "):
            raise InvalidOptionsError("base_indent", f"must contain only spaces, got {self.base_indent!r}")
        if self.max_depth < 1:
            raise InvalidOptionsError("max_depth", f"must be positive, got {self.max_depth}")


DEFAULT_OPTIONS = FormatOptions()
