"""Logging helper for prosemirror_html.

Example:
    >>> from prosemirror_html.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering document")
"""

from __future__ import annotations

import logging

_ROOT = "prosemirror_html"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``prosemirror_html``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'prosemirror_html.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
