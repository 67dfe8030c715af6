"""Built-in Tag implementations.

- SimpleTag: a named HTML element with all attributes rendered inline
- TextTag: emits nothing; text nodes render as their escaped text
- HeadingTag: ``<hN>`` driven by the ``level`` attribute

"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from prosemirror_html.errors import RenderError
from prosemirror_html.utils.text import escape_html


def format_attr_value(value: Any) -> str | None:
    """Format a single attribute value for an opening tag.

    Numbers and booleans are unquoted, booleans spelled as in JSON.
    Everything else is quoted via ``str()`` and escaped. ``None`` yields
    None, meaning the attribute is omitted.

    Examples:
        >>> format_attr_value(1)
        '1'
        >>> format_attr_value(2.0)
        '2'
        >>> format_attr_value(True)
        'true'
        >>> format_attr_value("_blank")
        '"_blank"'
    """
    match value:
        case None:
            return None
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            # 2.0 renders as 2
            if value.is_integer():
                return str(int(value))
            return repr(value)
        case _:
            return f'"{escape_html(str(value))}"'


def format_attrs(attrs: Mapping[str, Any]) -> str:
    """Render an attribute mapping as `` name=value`` pairs in mapping order."""
    parts: list[str] = []
    for name, value in attrs.items():
        formatted = format_attr_value(value)
        if formatted is None:
            continue
        parts.append(f" {name}={formatted}")
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class SimpleTag:
    """A plain HTML element.

    Renders ``<name attr="value" ...>`` on open and ``</name>`` on close.
    Self-closing tags (``br``, ``img``) render nothing on close.

    Example:
        >>> SimpleTag("a").render_opening({"href": "https://wikipedia.org/"})
        '<a href="https://wikipedia.org/">'
        >>> SimpleTag("br", self_closing=True).render_closing({})
        ''

    """

    name: str
    self_closing: bool = False

    def render_opening(self, attrs: Mapping[str, Any]) -> str:
        return f"<{self.name}{format_attrs(attrs)}>"

    def render_closing(self, attrs: Mapping[str, Any]) -> str:
        if self.self_closing:
            return ""
        return f"</{self.name}>"


@dataclass(frozen=True, slots=True)
class TextTag:
    """Tag for text nodes. Emits no markup."""

    def render_opening(self, attrs: Mapping[str, Any]) -> str:
        return ""

    def render_closing(self, attrs: Mapping[str, Any]) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class HeadingTag:
    """Heading element whose level comes from ``attrs["level"]``.

    Raises:
        RenderError: If ``level`` is missing or not a number
    """

    def render_opening(self, attrs: Mapping[str, Any]) -> str:
        return f"<h{_heading_level(attrs)}>"

    def render_closing(self, attrs: Mapping[str, Any]) -> str:
        return f"</h{_heading_level(attrs)}>"


def _heading_level(attrs: Mapping[str, Any]) -> int:
    if "level" not in attrs or attrs["level"] is None:
        raise RenderError("missing level attribute", type_name="heading")
    level = attrs["level"]
    if isinstance(level, bool) or not isinstance(level, (int, float)):
        raise RenderError(
            f"non-numeric level attribute: {level!r}", type_name="heading"
        )
    if isinstance(level, float) and not math.isfinite(level):
        raise RenderError(
            f"non-numeric level attribute: {level!r}", type_name="heading"
        )
    return int(level)
