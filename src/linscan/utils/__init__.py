"""Utility modules for linscan.

Provides:
- logger: get_logger for namespaced loggers, enable_debug_logging for the CLI
"""

from linscan.utils.logger import enable_debug_logging, get_logger

__all__ = [
    "enable_debug_logging",
    "get_logger",
]
