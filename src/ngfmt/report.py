"""Check mode: compare a template against its formatted form.

Hosts use this to list files that would change without rewriting them.

Example:
    >>> report = check_formatted("{{x}}", "{{ x }}", name="app.html")
    >>> report.changed
    True
    >>> print(report.format())
    app.html: would reformat
    --- app.html
    +++ app.html (formatted)
    @@ -1 +1 @@
    -{{x}}
    +{{ x }}

"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import unified_diff

from ngfmt.environment import terminal


@dataclass(frozen=True, slots=True)
class FormatReport:
    """Outcome of checking one template.

    Attributes:
        name: Display name for the template
        changed: True when formatting would alter the source
        diff: Unified diff from source to formatted text ("" if unchanged)
    """

    name: str
    changed: bool
    diff: str

    def format(self, *, color: bool | None = None) -> str:
        """Render a one-line status, followed by the colored diff if changed.

        Args:
            color: Force colors off (e.g. when writing to a file). Defaults
                to the terminal's color support.
        """
        if not self.changed:
            text = f"{terminal.location(self.name)}: {terminal.hint('already formatted')}"
        else:
            lines = [f"{terminal.location(self.name)}: {terminal.error_line('would reformat')}"]
            lines.extend(terminal.diff_line(line) for line in self.diff.splitlines())
            text = "\n".join(lines)

        if color is None:
            color = terminal.supports_color()
        return text if color else terminal.strip_colors(text)


def check_formatted(source: str, formatted: str, name: str | None = None) -> FormatReport:
    """Compare source text with the printer's output for it.

    Args:
        source: Template text as found
        formatted: Printer output for the same template
        name: Display name (defaults to ``<template>``)
    """
    name = name or "<template>"
    if source == formatted:
        return FormatReport(name=name, changed=False, diff="")

    diff = unified_diff(
        source.splitlines(),
        formatted.splitlines(),
        fromfile=name,
        tofile=f"{name} (formatted)",
        lineterm="",
    )
    return FormatReport(name=name, changed=True, diff="\n".join(diff))
