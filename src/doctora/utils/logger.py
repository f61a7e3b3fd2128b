"""Minimal logging utilities for doctora.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from doctora.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "doctora." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'doctora.mymodule'
    """
    if not (name == "doctora" or name.startswith("doctora.")):
        name = f"doctora.{name}"
    return logging.getLogger(name)
