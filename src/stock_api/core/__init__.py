"""Core module containing cross-cutting concerns."""

from .config import Settings
from .exceptions import (
    ApplicationError,
    CSVExportError,
    DomainError,
    InfrastructureError,
    InvalidStockError,
    PresentationError,
    RepositoryError,
    StockAPIError,
    StockNotFoundError,
    StockUseCaseError,
)

__all__ = [
    # Configuration
    "Settings",
    # Exceptions
    "StockAPIError",
    "DomainError",
    "ApplicationError",
    "InfrastructureError",
    "PresentationError",
    "InvalidStockError",
    "StockNotFoundError",
    "RepositoryError",
    "CSVExportError",
    "StockUseCaseError",
]
