"""Domain-specific exception classes."""

from typing import Any

from .base import DomainError


class InvalidStockError(DomainError):
    """Raised when stock data breaks an entity rule."""

    pass


class StockNotFoundError(DomainError):
    """Raised when a stock does not exist in the caller's store."""

    def __init__(self, stock_id: int, store_id: str, details: dict[str, Any] | None = None) -> None:
        message = f"Stock with ID '{stock_id}' not found in store '{store_id}'"
        super().__init__(message, "STOCK_NOT_FOUND", details)
        self.stock_id = stock_id
        self.store_id = store_id
