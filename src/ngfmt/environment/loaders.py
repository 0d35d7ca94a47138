"""Tree loaders: turn host parser output into ngfmt nodes.

ngfmt does not parse markup. A host parser produces an AST and these
helpers convert its JSON-like form into frozen nodes:

    ```python
    {
        "type": "root",
        "children": [
            {
                "type": "element",
                "name": "button",
                "attrs": [{"name": "(click)", "value": "go()"}],
                "children": [{"type": "text", "value": "Go"}],
            },
            {"type": "comment", "value": " note "},
        ],
    }
    ```

``docType`` children are skipped: host parsers reduce the declaration to
a bare name, so the verbatim text is recovered from the source with
`extract_doctype()` and carried on the Root instead.

"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping, Sequence
from difflib import get_close_matches
from typing import Any

from ngfmt.environment.exceptions import (
    ErrorCode,
    TreeShapeError,
    build_source_snippet,
)
from ngfmt.nodes import Attribute, Comment, Element, Node, Root, Text

logger = logging.getLogger(__name__)

_DOCTYPE_RE = re.compile(r"^<!DOCTYPE[^>]*>", re.IGNORECASE)

_SKIPPED_TYPES = frozenset({"docType"})

Path = tuple[str | int, ...]


def extract_doctype(source: str) -> str | None:
    """Return the leading ``<!DOCTYPE ...>`` exactly as written, if any.

    Example:
        >>> extract_doctype("<!doctype html>\\n<html></html>")
        '<!doctype html>'
    """
    match = _DOCTYPE_RE.match(source)
    return match.group(0) if match else None


def _field(data: Mapping[str, Any], key: str, path: Path, *, optional: bool = False) -> Any:
    if key not in data:
        if optional:
            return None
        raise TreeShapeError(
            f"Node is missing required field '{key}'",
            path=path,
            code=ErrorCode.MISSING_FIELD,
        )
    return data[key]


def _string(value: Any, key: str, path: Path, *, nullable: bool = False) -> str | None:
    if value is None and nullable:
        return None
    if not isinstance(value, str):
        raise TreeShapeError(
            f"Field '{key}' must be a string, got {type(value).__name__}",
            path=(*path, key),
            code=ErrorCode.INVALID_FIELD,
        )
    return value


def _sequence(value: Any, key: str, path: Path) -> Sequence[Any]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise TreeShapeError(
            f"Field '{key}' must be a list, got {type(value).__name__}",
            path=(*path, key),
            code=ErrorCode.INVALID_FIELD,
        )
    return value


def _build_children(data: Mapping[str, Any], path: Path) -> tuple[Node, ...]:
    children: list[Node] = []
    for i, child in enumerate(_sequence(data.get("children"), "children", path)):
        child_path = (*path, "children", i)
        if isinstance(child, Mapping) and child.get("type") in _SKIPPED_TYPES:
            logger.debug("Skipping %s node at %s", child["type"], child_path)
            continue
        children.append(_build(child, child_path))
    return tuple(children)


def _build_attribute(data: Any, path: Path) -> Attribute:
    if not isinstance(data, Mapping):
        raise TreeShapeError(
            f"Attribute must be a mapping, got {type(data).__name__}",
            path=path,
            code=ErrorCode.INVALID_FIELD,
        )
    name = _string(_field(data, "name", path), "name", path)
    value = _string(_field(data, "value", path, optional=True), "value", path, nullable=True)
    return Attribute(name=name, value=value)


def _build_element(data: Mapping[str, Any], path: Path) -> Element:
    name = _string(_field(data, "name", path), "name", path)
    attrs = tuple(
        _build_attribute(attr, (*path, "attrs", i))
        for i, attr in enumerate(_sequence(data.get("attrs"), "attrs", path))
    )
    return Element(name=name, attrs=attrs, children=_build_children(data, path))


def _build_text(data: Mapping[str, Any], path: Path) -> Text:
    value = _field(data, "value", path, optional=True)
    return Text(_string(value, "value", path, nullable=True))


def _build_comment(data: Mapping[str, Any], path: Path) -> Comment:
    return Comment(_string(_field(data, "value", path), "value", path))


def _build_root(data: Mapping[str, Any], path: Path) -> Root:
    doctype = _string(data.get("doctype"), "doctype", path, nullable=True)
    return Root(children=_build_children(data, path), doctype=doctype)


_BUILDERS: dict[str, Callable[[Mapping[str, Any], Path], Node]] = {
    "root": _build_root,
    "element": _build_element,
    "text": _build_text,
    "comment": _build_comment,
}


def _build(data: Any, path: Path) -> Node:
    if not isinstance(data, Mapping):
        raise TreeShapeError(
            f"Node must be a mapping, got {type(data).__name__}",
            path=path,
            code=ErrorCode.INVALID_FIELD,
        )
    node_type = _field(data, "type", path)
    builder = _BUILDERS.get(node_type) if isinstance(node_type, str) else None
    if builder is None:
        matches = get_close_matches(str(node_type), list(_BUILDERS), n=1, cutoff=0.6)
        raise TreeShapeError(
            f"Unknown node type {node_type!r}",
            path=path,
            code=ErrorCode.UNKNOWN_NODE_TYPE,
            suggestion=matches[0] if matches else None,
        )
    return builder(data, path)


def tree_from_dict(data: Mapping[str, Any]) -> Node:
    """Build a node tree from a host parser's JSON-like AST.

    Args:
        data: Mapping with a ``type`` of root, element, text or comment

    Returns:
        The corresponding node (a Root for ``type: root``)

    Raises:
        TreeShapeError: Unknown node type, missing or mistyped field
    """
    return _build(data, ())


def tree_from_json(text: str) -> Node:
    """Decode a JSON AST dump and build its node tree.

    Raises:
        TreeShapeError: Invalid JSON (with a source snippet) or tree shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeShapeError(
            f"Invalid JSON tree: {e.msg}",
            code=ErrorCode.INVALID_JSON,
            source_snippet=build_source_snippet(text, e.lineno, column=e.colno - 1),
        ) from e
    return tree_from_dict(data)
