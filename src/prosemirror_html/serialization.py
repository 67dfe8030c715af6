"""JSON conversion for ProseMirror documents.

Turns a ProseMirror JSON payload into the Node/Mark tree consumed by the
renderer, and back. JSON ``null`` and absent fields are treated the same;
keys the model does not know are ignored.

Example:
    >>> doc = from_json('{"type": "doc", "content": [{"type": "text", "text": "hi"}]}')
    >>> doc.content[0].text
    'hi'
    >>> to_json(doc)
    '{"type": "doc", "content": [{"type": "text", "text": "hi"}]}'

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Mapping
from typing import Any

from prosemirror_html.errors import ParseError
from prosemirror_html.nodes import Mark, Node


def from_json(data: str | bytes | bytearray) -> Node:
    """Parse a ProseMirror JSON payload into a Node tree.

    Args:
        data: JSON text (bytes are decoded as UTF-8/16/32 by json.loads)

    Returns:
        Root node of the parsed tree.

    Raises:
        ParseError: If the payload is not valid JSON or not a node object.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise ParseError(e.msg, lineno=e.lineno, col_offset=e.colno) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"payload is not valid unicode: {e.reason}") from e
    except RecursionError as e:
        raise ParseError("payload nesting too deep") from e
    return from_dict(raw)


def from_dict(data: Any) -> Node:
    """Build a Node tree from decoded JSON (nested dicts and lists).

    Raises:
        ParseError: If a field has the wrong JSON type or ``type`` is missing.
            The message names the offending path, e.g. ``content[0].marks[1]``.

    """
    try:
        return _node_from_dict(data, "$")
    except RecursionError as e:
        raise ParseError("document nesting too deep") from e


def _node_from_dict(data: Any, path: str) -> Node:
    if not isinstance(data, Mapping):
        msg = f"{path}: expected a node object, got {_json_type(data)}"
        raise ParseError(msg)

    content_raw = _optional(data, "content", list, path)
    marks_raw = _optional(data, "marks", list, path)
    return Node(
        type=_required_type(data, path),
        attrs=_attrs(data, path),
        content=tuple(
            _node_from_dict(child, f"{path}.content[{i}]")
            for i, child in enumerate(content_raw or ())
        ),
        marks=tuple(
            _mark_from_dict(mark, f"{path}.marks[{i}]")
            for i, mark in enumerate(marks_raw or ())
        ),
        text=_optional(data, "text", str, path) or "",
    )


def _mark_from_dict(data: Any, path: str) -> Mark:
    if not isinstance(data, Mapping):
        msg = f"{path}: expected a mark object, got {_json_type(data)}"
        raise ParseError(msg)
    return Mark(type=_required_type(data, path), attrs=_attrs(data, path))


def _required_type(data: Mapping[str, Any], path: str) -> str:
    type_name = data.get("type")
    if type_name is None:
        msg = f"{path}: missing 'type' field"
        raise ParseError(msg)
    if not isinstance(type_name, str):
        msg = f"{path}: 'type' must be a string, got {_json_type(type_name)}"
        raise ParseError(msg)
    return type_name


def _attrs(data: Mapping[str, Any], path: str) -> dict[str, Any]:
    attrs = _optional(data, "attrs", Mapping, path)
    return dict(attrs) if attrs else {}


def _optional(data: Mapping[str, Any], key: str, expected: type, path: str) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, expected):
        msg = f"{path}: {key!r} has wrong type {_json_type(value)}"
        raise ParseError(msg)
    return value


def _json_type(value: Any) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list() | tuple():
            return "array"
        case Mapping():
            return "object"
        case _:
            return type(value).__name__


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a Node tree to ProseMirror JSON-compatible dicts.

    Empty fields are omitted, matching what ProseMirror emits.

    """
    result: dict[str, Any] = {"type": node.type}
    if node.attrs:
        result["attrs"] = dict(node.attrs)
    if node.content:
        result["content"] = [to_dict(child) for child in node.content]
    if node.marks:
        result["marks"] = [_mark_to_dict(mark) for mark in node.marks]
    if node.text:
        result["text"] = node.text
    return result


def _mark_to_dict(mark: Mark) -> dict[str, Any]:
    result: dict[str, Any] = {"type": mark.type}
    if mark.attrs:
        result["attrs"] = dict(mark.attrs)
    return result


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a Node tree to a JSON string.

    Keys keep insertion order; attribute order is significant for
    rendering, so keys are not sorted.

    """
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)
