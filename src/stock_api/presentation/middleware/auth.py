"""Authentication middleware resolving the caller's store context."""

from collections.abc import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ...core.config.config import Settings
from ...infrastructure.logging.structured_logger import StructuredLogger, get_logger
from ..schemas.common import ErrorResponse

logger = get_logger(__name__)

DEFAULT_EXEMPT_PATHS = frozenset({"/", "/health", "/docs", "/redoc", "/openapi.json"})


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Middleware that sets ``request.state.store_id`` and ``user_id``.

    With authentication enabled the pair comes from the API key in the
    ``Authorization: Bearer`` header. Otherwise the configured defaults
    are used, overridable per request with ``X-Store-ID``/``X-User-ID``.
    """

    def __init__(
        self,
        app,
        settings: Settings,
        exempt_paths: set[str] | None = None,
        enabled: bool = True,
    ):
        """Initialize authentication middleware."""
        super().__init__(app)
        self.settings = settings
        self.exempt_paths = exempt_paths if exempt_paths is not None else set(DEFAULT_EXEMPT_PATHS)
        self.enabled = enabled

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Resolve the store context for the request."""
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        if not self.enabled:
            store_id = request.headers.get("X-Store-ID") or self.settings.DEFAULT_STORE_ID
            user_id = request.headers.get("X-User-ID") or self.settings.DEFAULT_USER_ID
            return await self._continue(request, call_next, store_id, user_id)

        auth_header = request.headers.get("Authorization")

        if not auth_header:
            return self._unauthorized(request, "authentication_missing", "Please provide a valid API key")

        scheme, _, api_key = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not api_key.strip():
            return self._unauthorized(
                request,
                "authentication_invalid_format",
                "Authorization header must be in 'Bearer <api key>' format",
            )

        resolved = self.settings.resolve_api_key(api_key.strip())
        if resolved is None:
            return self._unauthorized(request, "authentication_invalid_key", "Unknown API key")

        store_id, user_id = resolved
        return await self._continue(request, call_next, store_id, user_id)

    async def _continue(self, request: Request, call_next: Callable, store_id: str, user_id: str) -> Response:
        request.state.store_id = store_id
        request.state.user_id = user_id
        StructuredLogger.set_store_id(store_id)
        return await call_next(request)

    def _unauthorized(self, request: Request, event: str, message: str) -> JSONResponse:
        """Build a 401 response for a rejected request."""
        request_id = getattr(request.state, "request_id", None)

        logger.warning(event, request_id=request_id, path=request.url.path)

        body = ErrorResponse(
            error_code="unauthorized",
            message=message,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=body.model_dump(),
            headers={"WWW-Authenticate": "Bearer"},
        )
