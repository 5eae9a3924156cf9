"""Minimal logging utilities for codeweave.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from codeweave.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering unit")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "codeweave." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'codeweave.mymodule'
    """
    if not (name == "codeweave" or name.startswith("codeweave.")):
        name = f"codeweave.{name}"
    return logging.getLogger(name)
