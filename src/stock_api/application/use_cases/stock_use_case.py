"""Use case for managing the stocks of a store."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import TypeVar

import structlog

from ...core.exceptions import StockAPIError, StockNotFoundError, StockUseCaseError
from ...domain.entities.stock import Stock
from ...domain.repositories.stock_repository import NewStock, StockRepository
from ..dtos.stock_dtos import CreateStockRequest, GetStocksRequest, UpdateStockRequest
from ..interfaces.stock_usecase_interface import StockUseCaseInterface

logger = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ROWS = 50000


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StockUseCase(StockUseCaseInterface):
    """
    Stock CRUD on top of a ``StockRepository``.

    Listing without a limit returns at most ``max_rows`` stocks, which is
    what the CSV export relies on.
    """

    def __init__(
        self,
        repository: StockRepository,
        max_rows: int = DEFAULT_MAX_ROWS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the use case.

        Args:
            repository: Stock persistence
            max_rows: Upper bound for any listing
            clock: Source of update timestamps
        """
        self._repository = repository
        self._max_rows = max_rows
        self._clock = clock

    async def get_stocks(self, request: GetStocksRequest) -> list[Stock]:
        limit = self._max_rows if request.limit is None else min(request.limit, self._max_rows)
        offset = request.offset or 0

        stocks = await self._run(
            "get_stocks",
            lambda: self._repository.list_by_store(request.store_id, limit=limit, offset=offset),
            store_id=request.store_id,
        )
        logger.debug("Stocks listed", store_id=request.store_id, limit=limit, offset=offset, count=len(stocks))
        return stocks

    async def get_stock(self, store_id: str, stock_id: int) -> Stock:
        stock = await self._run("get_stock", lambda: self._repository.get(store_id, stock_id), store_id=store_id)
        if stock is None:
            raise StockNotFoundError(stock_id, store_id)
        return stock

    async def create_stock(self, request: CreateStockRequest) -> Stock:
        stock = await self._run(
            "create_stock",
            lambda: self._repository.create(self._to_new_stock(request)),
            store_id=request.store_id,
        )
        logger.info("Stock created", stock_id=stock.id, store_id=stock.store_id)
        return stock

    async def create_bulk_stock(self, requests: list[CreateStockRequest]) -> list[int]:
        new_stocks = [self._to_new_stock(request) for request in requests]
        stocks = await self._run("create_bulk_stock", lambda: self._repository.create_many(new_stocks))
        stock_ids = [stock.id for stock in stocks]
        logger.info("Stocks created in bulk", count=len(stock_ids))
        return stock_ids

    async def update_stock(self, request: UpdateStockRequest) -> Stock:
        current = await self.get_stock(request.store_id, request.stock_id)
        updated = current.with_changes(
            name=request.name,
            price=request.price,
            quantity=request.quantity,
            user_id=request.user_id,
            updated_at=self._clock(),
        )
        stock = await self._run("update_stock", lambda: self._repository.update(updated), store_id=request.store_id)
        logger.info("Stock updated", stock_id=stock.id, store_id=stock.store_id)
        return stock

    async def delete_stock(self, store_id: str, stock_id: int) -> None:
        deleted = await self._run("delete_stock", lambda: self._repository.delete(store_id, stock_id), store_id=store_id)
        if not deleted:
            raise StockNotFoundError(stock_id, store_id)
        logger.info("Stock deleted", stock_id=stock_id, store_id=store_id)

    @staticmethod
    def _to_new_stock(request: CreateStockRequest) -> NewStock:
        return NewStock(
            name=request.name,
            price=request.price,
            quantity=request.quantity,
            store_id=request.store_id,
            user_id=request.user_id,
        )

    async def _run(self, operation: str, call: Callable[[], Awaitable[T]], store_id: str | None = None) -> T:
        """Await a repository call, wrapping unexpected failures in ``StockUseCaseError``."""
        try:
            return await call()
        except StockAPIError:
            raise
        except Exception as e:
            logger.error(
                "Stock repository call failed",
                operation=operation,
                store_id=store_id,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise StockUseCaseError(
                f"{operation} failed: {e}",
                details={"operation": operation, "store_id": store_id},
            ) from e
