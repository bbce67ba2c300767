"""Application service interface for stock management."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...domain.entities.stock import Stock
from ..dtos.stock_dtos import CreateStockRequest, GetStocksRequest, UpdateStockRequest


class StockUseCaseInterface(ABC):
    """Interface for application-level stock operations.

    Every operation raises ``StockUseCaseError`` (or a subclass of
    ``StockAPIError``) when it cannot complete.
    """

    @abstractmethod
    async def get_stocks(self, request: GetStocksRequest) -> list[Stock]:
        """List the stocks of a store."""
        pass

    @abstractmethod
    async def get_stock(self, store_id: str, stock_id: int) -> Stock:
        """Fetch one stock of a store."""
        pass

    @abstractmethod
    async def create_stock(self, request: CreateStockRequest) -> Stock:
        """Create a stock."""
        pass

    @abstractmethod
    async def create_bulk_stock(self, requests: list[CreateStockRequest]) -> list[int]:
        """Create several stocks and return their IDs in input order."""
        pass

    @abstractmethod
    async def update_stock(self, request: UpdateStockRequest) -> Stock:
        """Update a stock."""
        pass

    @abstractmethod
    async def delete_stock(self, store_id: str, stock_id: int) -> None:
        """Delete a stock."""
        pass
