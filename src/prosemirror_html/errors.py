"""Exception classes for prosemirror_html.

Every failure raised while parsing or rendering a document derives from
ProseMirrorHtmlError. Rendering stops at the first error; nothing is caught
and replaced with fallback markup.
"""

from __future__ import annotations


class ProseMirrorHtmlError(Exception):
    """Base exception for all prosemirror_html errors."""

    pass


class ParseError(ProseMirrorHtmlError):
    """The input payload could not be turned into a document tree.

    Raised for malformed JSON and for JSON whose shape does not match the
    node model (e.g. ``content`` that is not an array).
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line in the JSON payload (1-indexed)
            col_offset: Column in the JSON payload (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class StructuralError(ProseMirrorHtmlError):
    """The root node is not a document root (``type != "doc"``)."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"not a document root node: got type {type_name!r}")


class UnknownTypeError(ProseMirrorHtmlError):
    """A node or mark type has no registered tags.

    Attributes:
        kind: "node" or "mark"
        type_name: The unregistered type name
    """

    def __init__(self, kind: str, type_name: str) -> None:
        self.kind = kind
        self.type_name = type_name
        super().__init__(f"unknown {kind} {type_name!r}")


class RenderError(ProseMirrorHtmlError):
    """A tag could not render its markup.

    Raised by Tag implementations when required attributes are missing or
    have the wrong type.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize render error.

        Args:
            message: Description of the failure
            type_name: Node or mark type being rendered (optional)
        """
        self.message = message
        self.type_name = type_name
        prefix = f"{type_name}: " if type_name else ""
        super().__init__(f"{prefix}{message}")


class DepthLimitError(RenderError):
    """Document nesting exceeded ``RenderConfig.max_depth``."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"document nesting exceeds max_depth={max_depth}")
