"""Dependency injection providers for the application."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status

from ..application.interfaces.stock_usecase_interface import StockUseCaseInterface
from ..application.use_cases.stock_use_case import StockUseCase
from ..domain.repositories.stock_repository import StockRepository
from .config.config import Settings


@dataclass(frozen=True)
class StoreContext:
    """Store and user a request acts for."""

    store_id: str
    user_id: str


# --- Configuration Dependencies ---


@lru_cache
def get_settings() -> Settings:
    """Get application settings (cached singleton).

    Returns:
        Application settings instance
    """
    return Settings()


# --- Persistence Dependencies ---


def get_stock_repository(request: Request) -> StockRepository:
    """Get the stock repository attached to the running application.

    Args:
        request: Current request

    Returns:
        StockRepository implementation
    """
    return request.app.state.stock_repository


# --- Application Service Dependencies ---


def get_stock_use_case(
    repository: StockRepository = Depends(get_stock_repository),
    settings: Settings = Depends(get_settings),
) -> StockUseCaseInterface:
    """Get stock use case.

    Args:
        repository: Stock repository
        settings: Application settings

    Returns:
        StockUseCaseInterface implementation
    """
    return StockUseCase(repository=repository, max_rows=settings.CSV_EXPORT_MAX_ROWS)


# --- Request Context Dependencies ---


def get_store_context(request: Request) -> StoreContext:
    """Read the store context resolved by the authentication middleware.

    Raises:
        HTTPException: 401 when no store context was resolved
    """
    store_id = getattr(request.state, "store_id", None)
    user_id = getattr(request.state, "user_id", None)

    if not store_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Store context is missing")

    return StoreContext(store_id=store_id, user_id=user_id or "")
