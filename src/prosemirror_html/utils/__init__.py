"""Utility modules for prosemirror_html.

Provides:
- text: escape_html for text content and attribute values
- logger: get_logger for logging
"""

from prosemirror_html.utils.logger import get_logger
from prosemirror_html.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
