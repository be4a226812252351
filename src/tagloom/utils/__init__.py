"""Utility modules for Tagloom.

Provides:
- logger: get_logger for logging
"""

from tagloom.utils.logger import get_logger

__all__ = [
    "get_logger",
]
