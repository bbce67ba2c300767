"""Persistence adapters."""

from .in_memory_stock_repository import InMemoryStockRepository

__all__ = ["InMemoryStockRepository"]
