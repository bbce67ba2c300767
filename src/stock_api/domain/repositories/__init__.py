"""Repository interfaces."""

from .stock_repository import NewStock, StockRepository

__all__ = ["NewStock", "StockRepository"]
