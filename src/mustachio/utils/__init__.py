"""Utility modules for Mustachio.

Provides:
- logger: get_logger for logging
"""

from mustachio.utils.logger import get_logger

__all__ = [
    "get_logger",
]
