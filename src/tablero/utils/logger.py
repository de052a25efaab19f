"""Minimal logging utilities for tablero.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; hosts configure logging themselves.

Example:
    >>> from tablero.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Row added below")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tablero." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("commands")
        >>> logger.name
        'tablero.commands'
    """
    if not (name == "tablero" or name.startswith("tablero.")):
        name = f"tablero.{name}"
    return logging.getLogger(name)
