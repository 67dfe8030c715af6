"""Tags: pluggable opening/closing markup for node and mark types.

Implement the Tag protocol to render a custom type, then bind it with
``Renderer.register_node()`` or ``Renderer.register_mark()``.

Thread Safety:
Built-in tags are frozen dataclasses with no state. Safe to share.

"""

from prosemirror_html.tags.builtins import (
    HeadingTag,
    SimpleTag,
    TextTag,
    format_attr_value,
    format_attrs,
)
from prosemirror_html.tags.protocol import Tag

__all__ = [
    "HeadingTag",
    "SimpleTag",
    "Tag",
    "TextTag",
    "format_attr_value",
    "format_attrs",
]
