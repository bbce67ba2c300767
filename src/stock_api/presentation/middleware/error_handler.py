"""Error handler middleware for global exception handling."""

import traceback
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ...core.exceptions import StockAPIError
from ...infrastructure.logging.structured_logger import get_logger
from ..schemas.common import ErrorResponse

logger = get_logger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last line of defence for exceptions the routers did not handle.

    Anything that reaches this middleware is an internal failure and is
    answered with a 500 JSON body.
    """

    def __init__(self, app, debug: bool = False, include_traceback: bool = False):
        """Initialize error handler middleware.

        Args:
            app: FastAPI application instance
            debug: Whether to include the error text in responses
            include_traceback: Whether to include stack traces in responses
        """
        super().__init__(app)
        self.debug = debug
        self.include_traceback = include_traceback

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Convert unhandled exceptions into JSON responses.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/endpoint in the chain

        Returns:
            Response with error handling applied
        """
        try:
            return await call_next(request)
        except Exception as exc:
            return self._handle_exception(request, exc)

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, "request_id", None)

        logger.error(
            "server_error",
            request_id=request_id,
            error_type=exc.__class__.__name__,
            error_message=str(exc),
            path=request.url.path,
            method=request.method,
            exc_info=True,
        )

        details: dict[str, Any] = {}
        if isinstance(exc, StockAPIError) and self.debug:
            details.update(exc.details)
        if self.debug:
            details.update(self._get_debug_info(exc))

        body = ErrorResponse(
            error_code="internal_server_error",
            message=str(exc) if self.debug else "An unexpected error occurred",
            details=details,
            request_id=request_id,
            path=request.url.path,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=jsonable_encoder(body),
        )

    def _get_debug_info(self, exc: Exception) -> dict[str, Any]:
        """Get debug information for an exception."""
        debug_info: dict[str, Any] = {
            "exception_type": exc.__class__.__name__,
            "exception_message": str(exc),
        }

        if self.include_traceback:
            debug_info["traceback"] = traceback.format_exception(type(exc), exc, exc.__traceback__)

        return debug_info
