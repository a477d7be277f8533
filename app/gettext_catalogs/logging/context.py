"""Request context binding for structured logging.

Binds request-scoped values (correlation id, active locale and domain)
to every log entry emitted while a request is processed.

Usage:
    with bind_request_context(locale="es_AR", domain="messages"):
        logger.info("processing_request")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    locale: Optional[str] = None,
    domain: Optional[str] = None,
    request_path: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind request-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique request identifier. Auto-generated if not provided.
        locale: Active locale for the request.
        domain: Active catalog domain for the request.
        request_path: HTTP request path.
        **extra_context: Additional key-value pairs to include in logs.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if locale is not None:
        context["locale"] = locale

    if domain is not None:
        context["domain"] = domain

    if request_path is not None:
        context["request_path"] = request_path

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def clear_request_context() -> None:
    """Clear all request-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
