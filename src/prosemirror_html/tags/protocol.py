"""Tag protocol for node and mark rendering.

A Tag produces the opening and closing markup for one node or mark type.
The renderer passes the node's (or mark's) attributes to both methods, so a
tag can use them on either side, e.g. to close a heading with ``</h2>``.

Thread Safety:
Tags must be stateless. Both methods are pure functions of ``attrs`` and
may be called concurrently from multiple threads.

Example:
    >>> class DetailsTag:
    ...     def render_opening(self, attrs):
    ...         summary = attrs.get("summary", "")
    ...         return f"<details><summary>{summary}</summary>"
    ...
    ...     def render_closing(self, attrs):
    ...         return "</details>"

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Tag(Protocol):
    """Protocol for tag implementations.

    Either method may return an empty string to emit nothing. Raising
    RenderError halts rendering and the error reaches the caller of
    ``Renderer.render()`` unchanged.

    """

    def render_opening(self, attrs: Mapping[str, Any]) -> str:
        """Render the opening markup.

        Args:
            attrs: Attributes of the node or mark being rendered

        Returns:
            Opening markup (may be empty)

        Raises:
            RenderError: If the attributes cannot be rendered
        """
        ...

    def render_closing(self, attrs: Mapping[str, Any]) -> str:
        """Render the closing markup.

        Args:
            attrs: Attributes of the node or mark being rendered

        Returns:
            Closing markup (empty for self-closing or no-op tags)

        Raises:
            RenderError: If the attributes cannot be rendered
        """
        ...
