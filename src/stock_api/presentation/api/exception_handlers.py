"""
Exception handlers for FastAPI.

Request validation failures become 400 responses and every
``HTTPException`` is rendered with the shared ``ErrorResponse`` body.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...infrastructure.logging.structured_logger import get_logger
from ..schemas.common import ErrorResponse

logger = get_logger(__name__)

ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    500: "internal_server_error",
}


def get_request_id(request: Request) -> str | None:
    """Request ID set by the middleware, falling back to the incoming header."""
    return getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")


def _summarize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Keep the JSON-safe parts of pydantic error entries."""
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request binding and validation errors.

    Args:
        request: FastAPI request object
        exc: Request validation error instance

    Returns:
        400 JSON error response with field-level details
    """
    request_id = get_request_id(request)
    validation_errors = _summarize_validation_errors(list(exc.errors()))

    if validation_errors:
        first = validation_errors[0]
        location = ".".join(first["loc"])
        message = f"{location}: {first['msg']}" if location else first["msg"]
    else:
        message = "Request validation failed"

    logger.warning(
        "client_error",
        request_id=request_id,
        path=request.url.path,
        method=request.method,
        error_count=len(validation_errors),
        error_message=message,
    )

    body = ErrorResponse(
        error_code="validation_error",
        message=message,
        details={"validation_errors": validation_errors},
        request_id=request_id,
        path=request.url.path,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTP exceptions with the shared error body.

    Args:
        request: FastAPI request object
        exc: HTTP exception instance

    Returns:
        JSON error response with the exception's status code
    """
    request_id = get_request_id(request)

    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "http_exception",
        request_id=request_id,
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method,
    )

    body = ErrorResponse(
        error_code=ERROR_CODES.get(exc.status_code, "http_error"),
        message=str(exc.detail) if exc.detail else f"HTTP error {exc.status_code}",
        request_id=request_id,
        path=request.url.path,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers to an application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
