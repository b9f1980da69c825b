"""Request ID logging context for tracing one availability query across modules.

Provides a request_id-aware logger that attaches a correlation ID to every
log message, so the engine's per-workshop debug lines can be tied back to
the HTTP request that triggered them.

Usage:
    from workshop_availability.logging_context import get_request_logger, set_request_id

    set_request_id("REQ-abc123")
    logger = get_request_logger(__name__)
    logger.info("Processing request")  # → [REQ-abc123] Processing request
"""

import logging
import uuid
from contextvars import ContextVar, Token

NO_REQUEST_ID = "-"

_request_id: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)


def new_request_id() -> str:
    """Generate a short correlation ID for an incoming request."""
    return f"REQ-{uuid.uuid4().hex[:12]}"


def set_request_id(request_id: str) -> Token:
    """Set the correlation ID for the current context."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


class RequestIdFilter(logging.Filter):
    """Injects request_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()  # type: ignore[attr-defined]
        return True


def get_request_logger(name: str) -> logging.Logger:
    """Return a logger with the RequestIdFilter attached.

    The filter adds ``request_id`` to each record so formatters can
    include ``%(request_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, RequestIdFilter) for f in logger.filters):
        logger.addFilter(RequestIdFilter())
    return logger
