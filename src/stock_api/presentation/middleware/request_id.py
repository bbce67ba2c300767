"""Request ID middleware for generating correlation IDs."""

import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...infrastructure.logging.structured_logger import StructuredLogger


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to generate and track request correlation IDs.

    The ID is attached to:
    - Request state for use in logging and processing
    - Response headers for client tracking
    - Context variables for structured logging
    """

    def __init__(self, app, header_name: str = "X-Request-ID"):
        """Initialize the middleware.

        Args:
            app: FastAPI application instance
            header_name: Name of the header to use for the request ID
        """
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Generate a unique request ID and add it to the request context.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/endpoint in the chain

        Returns:
            Response with request ID in headers
        """
        # Reuse an upstream ID (load balancer, client) when present
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())

        request.state.request_id = request_id
        StructuredLogger.set_correlation_id(request_id)
        StructuredLogger.set_request_path(request.url.path)

        try:
            response = await call_next(request)
        finally:
            StructuredLogger.clear_context()

        response.headers[self.header_name] = request_id

        return response
