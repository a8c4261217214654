"""Utility modules for mallex.

Provides:
- logger: get_logger for logging
"""

from mallex.utils.logger import get_logger

__all__ = ["get_logger"]
