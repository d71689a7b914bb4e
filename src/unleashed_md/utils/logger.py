"""Minimal logging utilities for unleashed-md.

Provides a simple get_logger function that wraps the standard library logging.
The package never configures handlers; that is left to the application.

Example:
    >>> from unleashed_md.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing markup")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "unleashed_md"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "unleashed_md." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'unleashed_md.mymodule'
    """
    # Ensure prefix for consistent namespacing
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
