"""Core exception classes for the stock API.

This module provides a hierarchy of custom exceptions that are used
throughout the application to provide clear error handling and proper
HTTP status code mapping.
"""

from .application import StockUseCaseError
from .base import (
    ApplicationError,
    DomainError,
    InfrastructureError,
    PresentationError,
    StockAPIError,
)
from .domain import (
    InvalidStockError,
    StockNotFoundError,
)
from .infrastructure import (
    CSVExportError,
    RepositoryError,
)

__all__ = [
    # Base exceptions
    "StockAPIError",
    "ApplicationError",
    "DomainError",
    "InfrastructureError",
    "PresentationError",
    # Domain exceptions
    "InvalidStockError",
    "StockNotFoundError",
    # Infrastructure exceptions
    "RepositoryError",
    "CSVExportError",
    # Application exceptions
    "StockUseCaseError",
]
