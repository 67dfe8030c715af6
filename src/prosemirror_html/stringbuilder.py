"""StringBuilder for O(n) HTML accumulation.

Fragments are appended to a list and joined once, instead of building the
output with repeated string concatenation.

Thread Safety:
Each render call creates its own builders. No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("Hello").append("</p>").build()
        '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment. Empty fragments are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of fragments (not characters)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
