"""Minimal logging utilities for Tagloom.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from tagloom.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Opening <html>")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tagloom." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tagloom.mymodule'
    """
    # Ensure tagloom prefix for consistent namespacing
    if not (name == "tagloom" or name.startswith("tagloom.")):
        name = f"tagloom.{name}"
    return logging.getLogger(name)
