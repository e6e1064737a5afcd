"""Public logging API for API response handling.

This package wraps Python's ``logging`` module with stdout defaults and
structured context propagation.
"""

from .config import configure_from_settings, configure_logging, get_logger
from .context import (
    bind_context,
    clear_context,
    get_context,
    log_context,
    response_fields,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_from_settings",
    "configure_logging",
    "get_context",
    "get_logger",
    "log_context",
    "response_fields",
]
