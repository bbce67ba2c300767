"""Data transfer objects for the application layer."""

from .stock_dtos import CreateStockRequest, GetStocksRequest, UpdateStockRequest

__all__ = [
    "CreateStockRequest",
    "GetStocksRequest",
    "UpdateStockRequest",
]
