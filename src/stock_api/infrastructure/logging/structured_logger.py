"""Structured logging service for the stock API."""

import uuid
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.types import EventDict

# Context variables for request tracking
correlation_id_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)
store_id_ctx: ContextVar[str | None] = ContextVar("store_id", default=None)
request_path_ctx: ContextVar[str | None] = ContextVar("request_path", default=None)

SENSITIVE_FIELDS = ("authorization", "api_key", "token", "password", "secret")


def add_request_context(logger: Any, name: str, event_dict: EventDict) -> EventDict:
    """Add correlation ID, store ID and request path to log events."""
    correlation_id = correlation_id_ctx.get()
    store_id = store_id_ctx.get()
    request_path = request_path_ctx.get()

    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    if store_id:
        event_dict.setdefault("store_id", store_id)
    if request_path:
        event_dict.setdefault("request_path", request_path)

    return event_dict


def mask_sensitive_data(logger: Any, name: str, event_dict: EventDict) -> EventDict:
    """Mask sensitive data in log events."""

    def mask_value(key: str, value: Any) -> Any:
        if isinstance(key, str):
            key_lower = key.lower()
            if any(sensitive_field in key_lower for sensitive_field in SENSITIVE_FIELDS):
                if isinstance(value, str) and len(value) > 4:
                    return f"{value[:2]}***{value[-2:]}"
                return "***"

        if isinstance(value, dict):
            return {k: mask_value(k, v) for k, v in value.items()}
        elif isinstance(value, list):
            return [mask_value("", item) for item in value]

        return value

    for key, value in event_dict.items():
        event_dict[key] = mask_value(key, value)

    return event_dict


class StructuredLogger:
    """Structured logger with request context helpers."""

    def __init__(self, name: str) -> None:
        """Initialize structured logger.

        Args:
            name: Logger name (usually __name__)
        """
        self.name = name
        self.logger = structlog.get_logger(name)

    def debug(self, event: str, **kwargs: Any) -> None:
        """Log debug event."""
        self.logger.debug(event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        """Log info event."""
        self.logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        """Log warning event."""
        self.logger.warning(event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        """Log error event."""
        self.logger.error(event, **kwargs)

    def log_request(
        self, method: str, path: str, status_code: int, duration_ms: float, store_id: str | None = None, **kwargs: Any
    ) -> None:
        """Log HTTP request details.

        Args:
            method: HTTP method
            path: Request path
            status_code: HTTP status code
            duration_ms: Request duration in milliseconds
            store_id: Store the request was scoped to, if known
            **kwargs: Additional context
        """
        self.info(
            "request_completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
            store_id=store_id,
            **kwargs,
        )

    @staticmethod
    def set_correlation_id(correlation_id: str | None = None) -> str:
        """Set correlation ID for current context.

        Args:
            correlation_id: Correlation ID to set, generates UUID if None

        Returns:
            The correlation ID that was set
        """
        if correlation_id is None:
            correlation_id = str(uuid.uuid4())

        correlation_id_ctx.set(correlation_id)
        return correlation_id

    @staticmethod
    def set_store_id(store_id: str) -> None:
        """Set store ID for current context."""
        store_id_ctx.set(store_id)

    @staticmethod
    def set_request_path(path: str) -> None:
        """Set request path for current context."""
        request_path_ctx.set(path)

    @staticmethod
    def clear_context() -> None:
        """Clear all context variables."""
        correlation_id_ctx.set(None)
        store_id_ctx.set(None)
        request_path_ctx.set(None)

    @staticmethod
    def get_correlation_id() -> str | None:
        """Get current correlation ID."""
        return correlation_id_ctx.get()


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
