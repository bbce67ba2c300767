"""Common/shared schemas used across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        use_enum_values=True,
        extra="ignore",
    )


class ErrorResponse(BaseSchema):
    """Body returned for every failed request."""

    error: bool = Field(True, description="Always true for error bodies")
    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict, description="Additional error details")
    request_id: str | None = Field(None, description="Request correlation ID")
    path: str | None = Field(None, description="Request path")


class HealthStatus(BaseSchema):
    """Health check status."""

    status: str = Field(..., description="Health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    timestamp: float = Field(..., description="Unix timestamp of the check")


__all__ = [
    "BaseSchema",
    "ErrorResponse",
    "HealthStatus",
]
