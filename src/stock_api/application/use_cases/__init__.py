"""Application use cases."""

from .stock_use_case import StockUseCase

__all__ = ["StockUseCase"]
