"""ngfmt: canonical pretty-printer for Angular-style HTML templates.

Formats a parsed markup tree, including ``@if``/``@for``/``@switch``/``@defer``
control-flow blocks and ``{{ }}`` interpolation, into deterministic text.

Quickstart:
    >>> from ngfmt import Attribute, Element, Root, Text, format_tree
    >>> tree = Root(children=(
    ...     Element("app-x", attrs=(Attribute("[title]", "t"), Attribute("class", "c"))),
    ... ))
    >>> print(format_tree(tree))
    <app-x
      [title]="t"
      class="c">
    </app-x>

From a host parser's JSON AST:
    >>> from ngfmt import tree_from_json, format_tree
    >>> format_tree(tree_from_json(ast_json))

Architecture:
Host parser → tree → Segmenter (text nodes) → Printer → text

Pipeline stages:
1. **Loaders**: host AST (dict/JSON) → frozen nodes, doctype extraction
2. **Segmenter**: text node → PlainText / DirectiveOpen / BlockClose fragments
3. **Printer**: recursive layout with a per-call control-flow block stack

Layout rules:
- Elements with no content and at most one attribute stay on one line
- Several attributes go one per line: one unit deep without content,
  two units deep with content
- Control-flow bodies are one unit deeper than their header; ``} @else {``
  chains stay on the opener's indent
- Comments are kept byte-for-byte; void elements never get closing tags

Thread-Safety:
Nodes and options are frozen; the Printer keeps no per-call state.
Formatting the same or different trees concurrently is safe.

"""

from ngfmt.environment import (
    DEFAULT_OPTIONS,
    ErrorCode,
    FormatOptions,
    FormatterError,
    InvalidOptionsError,
    NestingDepthError,
    SourceSnippet,
    TreeShapeError,
    extract_doctype,
    tree_from_dict,
    tree_from_json,
)
from ngfmt.nodes import (
    Attribute,
    BlockClose,
    Comment,
    DirectiveOpen,
    Element,
    Node,
    PlainText,
    Root,
    Text,
    TextFragment,
)
from ngfmt.printer import Printer, format_source, format_tree
from ngfmt.report import FormatReport, check_formatted
from ngfmt.text import segment_text

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_OPTIONS",
    "Attribute",
    "BlockClose",
    "Comment",
    "DirectiveOpen",
    "Element",
    "ErrorCode",
    "FormatOptions",
    "FormatReport",
    "FormatterError",
    "InvalidOptionsError",
    "NestingDepthError",
    "Node",
    "PlainText",
    "Printer",
    "Root",
    "SourceSnippet",
    "Text",
    "TextFragment",
    "TreeShapeError",
    "__version__",
    "check_formatted",
    "extract_doctype",
    "format_source",
    "format_tree",
    "segment_text",
    "tree_from_dict",
    "tree_from_json",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # Signal: this module is safe for free-threading
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'ngfmt' has no attribute {name!r}")
