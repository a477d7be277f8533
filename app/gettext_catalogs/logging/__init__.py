"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all request context
"""

from gettext_catalogs.logging.setup import configure_logging, get_module_logger
from gettext_catalogs.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
]
