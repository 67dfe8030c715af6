"""Document model for ProseMirror-style JSON trees.

A document is a tree of Node instances. Leaf nodes carry text, container
nodes carry child nodes, and any node may carry marks (inline annotations
such as bold or link) that wrap its rendered output.

Example:
    >>> doc = Node(
    ...     type="doc",
    ...     content=(
    ...         Node(type="paragraph", content=(Node(type="text", text="Hi"),)),
    ...     ),
    ... )

Thread Safety:
All nodes are frozen dataclasses with tuple children and safe to share
across threads. Treat ``attrs`` mappings as read-only.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DOC_TYPE = "doc"
"""Type name of the document root node."""


def _empty_attrs() -> Mapping[str, Any]:
    return {}


@dataclass(frozen=True, slots=True)
class Mark:
    """Inline annotation wrapping the rendering of a node.

    Marks have no children; their tags are emitted around the node they
    are attached to.

    """

    type: str
    attrs: Mapping[str, Any] = field(default_factory=_empty_attrs)


@dataclass(frozen=True, slots=True)
class Node:
    """One element of the document tree (block, inline, or text).

    Attributes:
        type: Registry key, e.g. "paragraph" or "text"
        attrs: Attributes passed verbatim to the node's tags
        content: Child nodes; when non-empty the node renders as a container
        marks: Marks wrapping this node, outermost first
        text: Raw text of a leaf node (escaped on output)

    """

    type: str
    attrs: Mapping[str, Any] = field(default_factory=_empty_attrs)
    content: tuple[Node, ...] = ()
    marks: tuple[Mark, ...] = ()
    text: str = ""

    @property
    def is_container(self) -> bool:
        """True if the node renders its children rather than its text."""
        return len(self.content) > 0

    @property
    def is_document(self) -> bool:
        """True if this is a document root node."""
        return self.type == DOC_TYPE
