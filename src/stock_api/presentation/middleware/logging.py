"""Logging middleware for request/response logging."""

import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...infrastructure.logging.structured_logger import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for structured request/response logging.

    Logs every request with its request ID, timing, status code and
    error details.
    """

    def __init__(
        self,
        app,
        skip_paths: set[str] | None = None,
        log_request_body: bool = False,
    ):
        """Initialize logging middleware.

        Args:
            app: FastAPI application instance
            skip_paths: Set of paths to skip logging (e.g., health checks)
            log_request_body: Whether to log request body content
        """
        super().__init__(app)
        self.skip_paths = skip_paths if skip_paths is not None else {"/health"}
        self.log_request_body = log_request_body

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Log request and response details with timing.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/endpoint in the chain

        Returns:
            Response from the endpoint handler
        """
        if request.url.path in self.skip_paths:
            return await call_next(request)

        request_id = getattr(request.state, "request_id", "unknown")
        start_time = time.time()

        request_info = await self._get_request_info(request)
        logger.info("request_started", request_id=request_id, **request_info)

        try:
            response = await call_next(request)
        except Exception as exc:
            duration = time.time() - start_time
            logger.error(
                "request_failed",
                request_id=request_id,
                duration_ms=round(duration * 1000, 2),
                error=str(exc),
                error_type=exc.__class__.__name__,
            )
            raise

        duration = time.time() - start_time
        logger.log_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
            store_id=getattr(request.state, "store_id", None),
            request_id=request_id,
        )

        return response

    async def _get_request_info(self, request: Request) -> dict[str, Any]:
        """Extract structured information from the request.

        Args:
            request: The HTTP request

        Returns:
            Dictionary of request information
        """
        info = {
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": request.client.host if request.client else None,
        }

        if self.log_request_body and request.method in {"POST", "PUT", "PATCH"}:
            body = await request.body()
            if body:
                # Only log first 1000 characters to avoid log spam
                info["body_preview"] = body.decode("utf-8", errors="replace")[:1000]

        return info
