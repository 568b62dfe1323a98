"""Public logging API for errkit packages.

This package wraps Python's ``logging`` module with stdout defaults and
structured context propagation.
"""

from .config import ContextFilter, JsonFormatter, PlainFormatter, configure_logging, get_logger
from .context import bind_context, clear_context, error_context, get_context, log_context

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_context",
    "clear_context",
    "configure_logging",
    "error_context",
    "get_context",
    "get_logger",
    "log_context",
]
