"""Utility modules for loxlex.

Provides:
- logger: get_logger for logging
"""

from loxlex.utils.logger import get_logger

__all__ = ["get_logger"]
