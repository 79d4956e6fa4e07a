"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``keyvalues_parser.logging`` directly:
    from keyvalues_parser.logging import get_logger
"""

from keyvalues_parser.logging import (
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
)

__all__ = [
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
]
