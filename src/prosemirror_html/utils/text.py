"""Text escaping for HTML output.

Example:
    >>> from prosemirror_html.utils.text import escape_html
    >>> escape_html("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters in text and attribute values.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    NUL characters are replaced with U+FFFD.

    Args:
        text: Text to escape

    Returns:
        Escaped text, safe in element content and quoted attributes

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    if "\x00" in escaped:
        escaped = escaped.replace("\x00", "\ufffd")
    return escaped
