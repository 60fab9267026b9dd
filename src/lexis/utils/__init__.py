"""Utility modules for Lexis.

Provides:
- logger: get_logger for logging
"""

from lexis.utils.logger import get_logger

__all__ = [
    "get_logger",
]
