"""Pydantic schemas for API request/response models."""

from .common import BaseSchema, ErrorResponse, HealthStatus
from .requests import StockCreateRequest, StockUpdateRequest
from .responses import StockResponse

__all__ = [
    # Common schemas
    "BaseSchema",
    "ErrorResponse",
    "HealthStatus",
    # Request schemas
    "StockCreateRequest",
    "StockUpdateRequest",
    # Response schemas
    "StockResponse",
]
