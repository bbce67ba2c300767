"""Application service interfaces."""

from .stock_usecase_interface import StockUseCaseInterface

__all__ = ["StockUseCaseInterface"]
