"""Minimal logging utilities for gentree.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from gentree.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Reconciling generation %d", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "gentree." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'gentree.mymodule'
    """
    if not (name == "gentree" or name.startswith("gentree.")):
        name = f"gentree.{name}"
    return logging.getLogger(name)
