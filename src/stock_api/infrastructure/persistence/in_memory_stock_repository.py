"""In-process stock repository."""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Callable
from datetime import UTC, datetime

from ...core.exceptions import RepositoryError
from ...domain.entities.stock import Stock
from ...domain.repositories.stock_repository import NewStock, StockRepository
from ..logging.structured_logger import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemoryStockRepository(StockRepository):
    """Stock repository backed by a dict keyed on stock ID.

    IDs are assigned from a single counter shared by all stores and are
    never reused.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._stocks: dict[int, Stock] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()
        self._clock = clock

    async def list_by_store(self, store_id: str, limit: int, offset: int = 0) -> list[Stock]:
        async with self._lock:
            stocks = [stock for stock in self._stocks.values() if stock.store_id == store_id]
        stocks.sort(key=lambda stock: stock.id)
        return stocks[offset : offset + limit]

    async def get(self, store_id: str, stock_id: int) -> Stock | None:
        async with self._lock:
            stock = self._stocks.get(stock_id)
        if stock is None or stock.store_id != store_id:
            return None
        return stock

    async def create(self, new_stock: NewStock) -> Stock:
        async with self._lock:
            stock = self._build(new_stock)
            self._stocks[stock.id] = stock

        logger.debug("Stock created", stock_id=stock.id, store_id=stock.store_id)
        return stock

    async def create_many(self, new_stocks: list[NewStock]) -> list[Stock]:
        async with self._lock:
            # Build everything first so a rejected entry leaves the store untouched
            stocks = [self._build(new_stock) for new_stock in new_stocks]
            for stock in stocks:
                self._stocks[stock.id] = stock

        logger.debug("Stocks created", count=len(stocks))
        return stocks

    async def update(self, stock: Stock) -> Stock:
        async with self._lock:
            current = self._stocks.get(stock.id)
            if current is None or current.store_id != stock.store_id:
                raise RepositoryError(
                    f"Cannot update missing stock '{stock.id}'",
                    details={"stock_id": stock.id, "store_id": stock.store_id},
                )
            self._stocks[stock.id] = stock
        return stock

    async def delete(self, store_id: str, stock_id: int) -> bool:
        async with self._lock:
            stock = self._stocks.get(stock_id)
            if stock is None or stock.store_id != store_id:
                return False
            del self._stocks[stock_id]
        return True

    def _build(self, new_stock: NewStock) -> Stock:
        now = self._clock()
        return Stock(
            id=next(self._ids),
            name=new_stock.name,
            price=new_stock.price,
            quantity=new_stock.quantity,
            store_id=new_stock.store_id,
            user_id=new_stock.user_id,
            created_at=now,
            updated_at=now,
        )
