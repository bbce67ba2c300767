"""Abstract repository interface for stock persistence operations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..entities.stock import Stock


@dataclass(frozen=True)
class NewStock:
    """Field values for a stock that has not been stored yet."""

    name: str
    price: int
    quantity: int
    store_id: str
    user_id: str


class StockRepository(ABC):
    """
    Abstract repository interface for stock persistence operations.

    This interface defines the contract for stock storage implementations,
    enabling dependency inversion and testability.
    """

    @abstractmethod
    async def list_by_store(self, store_id: str, limit: int, offset: int = 0) -> list[Stock]:
        """List the stocks of a store ordered by ID.

        Args:
            store_id: Store whose stocks are listed
            limit: Maximum number of stocks to return
            offset: Number of stocks to skip (for pagination)

        Returns:
            List of stocks, oldest ID first

        Raises:
            RepositoryError: When the read fails
        """
        pass

    @abstractmethod
    async def get(self, store_id: str, stock_id: int) -> Stock | None:
        """Find a stock by its ID within a store.

        Returns:
            The stock if found in the store, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, new_stock: NewStock) -> Stock:
        """Store a new stock and return it with its assigned ID."""
        pass

    @abstractmethod
    async def create_many(self, new_stocks: list[NewStock]) -> list[Stock]:
        """Store several stocks at once.

        Either all stocks are stored or none are.

        Returns:
            The stored stocks in input order
        """
        pass

    @abstractmethod
    async def update(self, stock: Stock) -> Stock:
        """Replace a stored stock.

        Raises:
            RepositoryError: When the stock does not exist
        """
        pass

    @abstractmethod
    async def delete(self, store_id: str, stock_id: int) -> bool:
        """Delete a stock by its ID within a store.

        Returns:
            True if the stock was deleted, False if not found
        """
        pass
