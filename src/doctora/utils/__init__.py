"""Utility modules for doctora.

Provides:
- logger: get_logger for logging
"""

from doctora.utils.logger import get_logger

__all__ = [
    "get_logger",
]
