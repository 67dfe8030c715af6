"""prosemirror_html: render ProseMirror JSON documents to HTML.

A single-pass, recursive renderer with an extensible mapping from node and
mark type names to tags. Zero runtime dependencies.

Quick Start:
    >>> from prosemirror_html import render
    >>> render('{"type":"doc","content":[{"type":"heading","attrs":{"level":2},'
    ...        '"content":[{"type":"text","text":"Hello"}]}]}')
    '<h2>Hello</h2>'

Custom Types:
    >>> from prosemirror_html import Renderer, SimpleTag
    >>> renderer = Renderer()
    >>> _ = renderer.register_node("horizontal_rule", SimpleTag("hr", self_closing=True))
    >>> _ = renderer.register_mark("highlight", SimpleTag("mark"))
    >>> html = renderer.render(payload)

Installation:
    pip install prosemirror-html
"""

from collections.abc import Mapping
from typing import Any

from prosemirror_html.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from prosemirror_html.errors import (
    DepthLimitError,
    ParseError,
    ProseMirrorHtmlError,
    RenderError,
    StructuralError,
    UnknownTypeError,
)
from prosemirror_html.nodes import DOC_TYPE, Mark, Node
from prosemirror_html.registry import TagRegistry, create_default_registry
from prosemirror_html.renderer import Renderer
from prosemirror_html.serialization import from_dict, from_json, to_dict, to_json
from prosemirror_html.tags import HeadingTag, SimpleTag, Tag, TextTag

__version__ = "0.2.0"


def parse(data: str | bytes | bytearray | Mapping[str, Any]) -> Node:
    """Parse ProseMirror JSON into a Node tree.

    Args:
        data: JSON text, or JSON already decoded into dicts and lists

    Returns:
        Root node

    Raises:
        ParseError: If the payload is malformed
    """
    if isinstance(data, Mapping):
        return from_dict(data)
    return from_json(data)


def render(
    doc: str | bytes | bytearray | Mapping[str, Any] | Node,
    *,
    registry: TagRegistry | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render a ProseMirror document to HTML.

    Builds a one-off Renderer. For repeated rendering with custom types,
    create a Renderer once and reuse it.

    Args:
        doc: JSON payload, decoded JSON, or a Node tree rooted at ``doc``
        registry: Tag bindings (defaults to create_default_registry())
        config: Render options (defaults to the context's RenderConfig)

    Returns:
        HTML string

    Example:
        >>> render({"type": "doc", "content": [{"type": "text", "text": "a & b"}]})
        'a &amp; b'
    """
    return Renderer(registry, config=config).render(doc)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "Renderer",
    # Document model
    "DOC_TYPE",
    "Mark",
    "Node",
    # Tags
    "HeadingTag",
    "SimpleTag",
    "Tag",
    "TextTag",
    # Registry
    "TagRegistry",
    "create_default_registry",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "ProseMirrorHtmlError",
    "ParseError",
    "StructuralError",
    "UnknownTypeError",
    "RenderError",
    "DepthLimitError",
]
