"""HTML renderer for ProseMirror document trees.

Walks the tree depth-first in a single pass. For every node the renderer
opens the node's marks, opens the node's own tags, renders the children (or
the escaped text of a leaf), then closes everything in reverse order, so
tags are always properly nested.

Thread Safety:
All per-render state lives on the call stack and in a StringBuilder local to
the call. Multiple threads can share one Renderer and call render()
concurrently, provided nobody calls register_node()/register_mark() while
renders are in flight.

Example:
    >>> renderer = Renderer()
    >>> renderer.render('{"type":"doc","content":[{"type":"paragraph",'
    ...                 '"content":[{"type":"text","text":"Hi","marks":[{"type":"bold"}]}]}]}')
    '<p><strong>Hi</strong></p>'
"""

from collections.abc import Mapping
from typing import Any

from prosemirror_html.config import RenderConfig, get_render_config
from prosemirror_html.errors import (
    DepthLimitError,
    RenderError,
    StructuralError,
    UnknownTypeError,
)
from prosemirror_html.nodes import DOC_TYPE, Node
from prosemirror_html.registry import TagRegistry, create_default_registry
from prosemirror_html.serialization import from_dict, from_json
from prosemirror_html.stringbuilder import StringBuilder
from prosemirror_html.tags.protocol import Tag
from prosemirror_html.utils.logger import get_logger
from prosemirror_html.utils.text import escape_html

logger = get_logger(__name__)

_RECURSION_LIMIT_MSG = "document nesting exceeds the interpreter recursion limit"


class Renderer:
    """Render ProseMirror documents to HTML.

    Each Renderer owns its own TagRegistry, starting from the defaults (or
    a copy of the registry passed in). Registering on one renderer never
    affects another.

    Usage:
        >>> renderer = Renderer()
        >>> _ = renderer.register_node("horizontal_rule", SimpleTag("hr", self_closing=True))
        >>> renderer.render(doc_json)

    Thread Safety:
        Configure first, then share. render() keeps no instance state.
    """

    __slots__ = ("_config", "_registry")

    def __init__(
        self,
        registry: TagRegistry | None = None,
        *,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            registry: Bindings to start from (copied). Defaults to
                create_default_registry().
            config: Render options. Defaults to the config active in the
                current context (see prosemirror_html.config).
        """
        self._registry = registry.copy() if registry is not None else create_default_registry()
        self._config = config if config is not None else get_render_config()

    @property
    def registry(self) -> TagRegistry:
        """The registry owned by this renderer."""
        return self._registry

    @property
    def config(self) -> RenderConfig:
        return self._config

    # =========================================================================
    # Registration
    # =========================================================================

    def register_node(self, type_name: str, *tags: Tag) -> "Renderer":
        """Register tags for a node type, replacing any existing binding.

        A type may render several nested elements (the default "table" is
        ``<table><tbody>...</tbody></table>``), hence several tags.

        Returns:
            Self for chaining
        """
        self._registry.register_node(type_name, *tags)
        return self

    def register_mark(self, type_name: str, *tags: Tag) -> "Renderer":
        """Register tags for a mark type, replacing any existing binding.

        Returns:
            Self for chaining
        """
        self._registry.register_mark(type_name, *tags)
        return self

    # =========================================================================
    # Rendering
    # =========================================================================

    def parse_node(self, data: str | bytes | bytearray | Mapping[str, Any]) -> Node:
        """Parse ProseMirror JSON (text or decoded dicts) into a Node.

        Raises:
            ParseError: If the payload is malformed
        """
        if isinstance(data, Mapping):
            return from_dict(data)
        return from_json(data)

    def render(self, doc: str | bytes | bytearray | Mapping[str, Any] | Node) -> str:
        """Render a ProseMirror document to HTML.

        The root must be a ``doc`` node. Its children are rendered in order
        and concatenated; the root itself emits no markup.

        Args:
            doc: JSON payload, decoded JSON, or an already built Node

        Returns:
            HTML string

        Raises:
            ParseError: If the payload is malformed
            StructuralError: If the root is not a ``doc`` node
            UnknownTypeError: If a node or mark type is not registered
            RenderError: If a tag fails, or nesting exceeds max_depth
        """
        root = doc if isinstance(doc, Node) else self.parse_node(doc)
        if root.type != DOC_TYPE:
            raise StructuralError(root.type)

        sb = StringBuilder()
        try:
            for child in root.content:
                self._render_node(child, sb, 1)
        except RecursionError as e:
            raise RenderError(_RECURSION_LIMIT_MSG) from e

        html = sb.build()
        logger.debug(
            "Rendered document: %d top-level nodes, %d chars", len(root.content), len(html)
        )
        return html

    def render_node(self, node: Node) -> str:
        """Render a single node (and its subtree) to HTML.

        Raises:
            UnknownTypeError: If a node or mark type is not registered
            RenderError: If a tag fails, or nesting exceeds max_depth
        """
        sb = StringBuilder()
        try:
            self._render_node(node, sb, 1)
        except RecursionError as e:
            raise RenderError(_RECURSION_LIMIT_MSG) from e
        return sb.build()

    def _render_node(self, node: Node, sb: StringBuilder, depth: int) -> None:
        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            raise DepthLimitError(max_depth)

        # Marks open in declaration order: the first mark is the outermost
        opened_marks: list[tuple[Mapping[str, Any], tuple[Tag, ...]]] = []
        for mark in node.marks:
            tags = self._registry.get_mark(mark.type)
            if tags is None:
                raise UnknownTypeError("mark", mark.type)
            mark_attrs = self._attrs(mark.attrs)
            for tag in tags:
                sb.append(tag.render_opening(mark_attrs))
            opened_marks.append((mark_attrs, tags))

        node_tags = self._registry.get_node(node.type)
        if node_tags is None:
            raise UnknownTypeError("node", node.type)
        attrs = self._attrs(node.attrs)
        for tag in node_tags:
            sb.append(tag.render_opening(attrs))

        if node.content:
            for child in node.content:
                self._render_node(child, sb, depth + 1)
        else:
            sb.append(escape_html(node.text))

        for tag in reversed(node_tags):
            sb.append(tag.render_closing(attrs))

        for mark_attrs, tags in reversed(opened_marks):
            for tag in reversed(tags):
                sb.append(tag.render_closing(mark_attrs))

    def _attrs(self, attrs: Mapping[str, Any]) -> Mapping[str, Any]:
        if self._config.sort_attributes and len(attrs) > 1:
            return dict(sorted(attrs.items()))
        return attrs
