"""Tag registry: type name to tag lookup.

The registry keeps two independent namespaces, one for node types and one
for mark types. A type name maps to an ordered tuple of tags: openings are
emitted in order, closings in reverse, so a "table" bound to ``table`` and
``tbody`` renders ``<table><tbody>...</tbody></table>``.

Thread Safety:
TagRegistry has no locking. Register everything before sharing a renderer
across threads and do not register while renders are running.

Example:
    >>> registry = create_default_registry()
    >>> _ = registry.register_node("horizontal_rule", SimpleTag("hr", self_closing=True))
    >>> registry.get_node("horizontal_rule")
    (SimpleTag(name='hr', self_closing=True),)

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prosemirror_html.tags.builtins import HeadingTag, SimpleTag, TextTag
from prosemirror_html.utils.logger import get_logger

if TYPE_CHECKING:
    from prosemirror_html.tags.protocol import Tag

logger = get_logger(__name__)


class TagRegistry:
    """Mutable mapping of node and mark type names to their tags.

    Registering a name that is already bound replaces the binding.
    Tags are not validated at registration time.

    """

    __slots__ = ("_marks", "_nodes")

    def __init__(
        self,
        nodes: dict[str, tuple[Tag, ...]] | None = None,
        marks: dict[str, tuple[Tag, ...]] | None = None,
    ) -> None:
        """Initialize registry, optionally from existing bindings.

        Args:
            nodes: Initial node bindings (copied)
            marks: Initial mark bindings (copied)
        """
        self._nodes: dict[str, tuple[Tag, ...]] = dict(nodes or {})
        self._marks: dict[str, tuple[Tag, ...]] = dict(marks or {})

    def register_node(self, type_name: str, *tags: Tag) -> TagRegistry:
        """Bind a node type to one or more tags.

        Args:
            type_name: Node type (e.g., "paragraph")
            *tags: Tags in opening order

        Returns:
            Self for chaining
        """
        if type_name in self._nodes:
            logger.debug("Overriding node type %r", type_name)
        self._nodes[type_name] = tuple(tags)
        return self

    def register_mark(self, type_name: str, *tags: Tag) -> TagRegistry:
        """Bind a mark type to one or more tags.

        Args:
            type_name: Mark type (e.g., "bold")
            *tags: Tags in opening order

        Returns:
            Self for chaining
        """
        if type_name in self._marks:
            logger.debug("Overriding mark type %r", type_name)
        self._marks[type_name] = tuple(tags)
        return self

    def get_node(self, type_name: str) -> tuple[Tag, ...] | None:
        """Get tags bound to a node type, or None if unregistered."""
        return self._nodes.get(type_name)

    def get_mark(self, type_name: str) -> tuple[Tag, ...] | None:
        """Get tags bound to a mark type, or None if unregistered."""
        return self._marks.get(type_name)

    def has_node(self, type_name: str) -> bool:
        return type_name in self._nodes

    def has_mark(self, type_name: str) -> bool:
        return type_name in self._marks

    @property
    def node_names(self) -> frozenset[str]:
        """All registered node type names."""
        return frozenset(self._nodes)

    @property
    def mark_names(self) -> frozenset[str]:
        """All registered mark type names."""
        return frozenset(self._marks)

    def copy(self) -> TagRegistry:
        """Independent registry with the same bindings."""
        return TagRegistry(nodes=self._nodes, marks=self._marks)

    def __repr__(self) -> str:
        return f"TagRegistry(nodes={len(self._nodes)}, marks={len(self._marks)})"


def create_default_registry() -> TagRegistry:
    """Create a registry with the default ProseMirror schema bindings.

    Returns:
        New registry; callers may extend or override it freely

    """
    registry = TagRegistry()

    registry.register_node("text", TextTag())
    registry.register_node("paragraph", SimpleTag("p"))
    registry.register_node("blockquote", SimpleTag("blockquote"))
    registry.register_node("bullet_list", SimpleTag("ul"))
    registry.register_node("heading", HeadingTag())
    registry.register_node("hard_break", SimpleTag("br", self_closing=True))
    registry.register_node("image", SimpleTag("img", self_closing=True))
    registry.register_node("list_item", SimpleTag("li"))
    registry.register_node("ordered_list", SimpleTag("ol"))
    registry.register_node("table", SimpleTag("table"), SimpleTag("tbody"))
    registry.register_node("table_cell", SimpleTag("td"))
    registry.register_node("table_header", SimpleTag("th"))
    registry.register_node("table_row", SimpleTag("tr"))

    registry.register_mark("link", SimpleTag("a"))
    registry.register_mark("bold", SimpleTag("strong"))
    registry.register_mark("code", SimpleTag("code"))
    registry.register_mark("italic", SimpleTag("em"))
    registry.register_mark("strike", SimpleTag("s"))
    registry.register_mark("subscript", SimpleTag("sub"))
    registry.register_mark("superscript", SimpleTag("sup"))
    registry.register_mark("underline", SimpleTag("u"))

    return registry
