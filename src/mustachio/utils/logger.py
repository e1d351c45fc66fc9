"""Minimal logging utilities for Mustachio.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from mustachio.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing template")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "mustachio." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'mustachio.mymodule'
    """
    if not (name == "mustachio" or name.startswith("mustachio.")):
        name = f"mustachio.{name}"
    return logging.getLogger(name)
