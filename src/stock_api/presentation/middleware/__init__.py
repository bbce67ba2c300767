"""Middleware components for request/response processing."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ...core.config.config import Settings
from .auth import AuthenticationMiddleware
from .error_handler import ErrorHandlerMiddleware
from .logging import LoggingMiddleware
from .request_id import RequestIDMiddleware


def setup_middleware(app: FastAPI, settings: Settings | None = None) -> None:
    """Configure all middleware for the FastAPI application.

    Middleware is executed in reverse order of addition, so we add them
    in the opposite order of desired execution.

    Args:
        app: FastAPI application instance
        settings: Application settings for middleware configuration
    """
    if settings is None:
        settings = Settings()

    # Global error handling (executed last)
    app.add_middleware(
        ErrorHandlerMiddleware,
        debug=not settings.is_production,
        include_traceback=settings.is_development,
    )

    # Store context resolution
    app.add_middleware(
        AuthenticationMiddleware,
        settings=settings,
        enabled=settings.auth_enabled,
    )

    # Request/response logging
    app.add_middleware(
        LoggingMiddleware,
        skip_paths={"/health"},
        log_request_body=settings.is_development,
    )

    # Request ID generation (executed first)
    app.add_middleware(RequestIDMiddleware)

    # CORS configuration based on environment
    cors_origins = ["*"] if settings.is_development else []

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "X-Request-ID"],
    )


__all__ = [
    "setup_middleware",
    "AuthenticationMiddleware",
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",
    "RequestIDMiddleware",
]
