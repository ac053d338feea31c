"""Utility modules for Plumas.

Provides:
- logger: get_logger for logging
"""

from plumas.utils.logger import get_logger

__all__ = [
    "get_logger",
]
