"""Utility modules for tablero.

Provides:
- logger: get_logger for logging
"""

from tablero.utils.logger import get_logger

__all__ = [
    "get_logger",
]
