"""Application-specific exception classes."""

from .base import ApplicationError


class StockUseCaseError(ApplicationError):
    """Raised when a stock use case cannot complete."""

    pass

