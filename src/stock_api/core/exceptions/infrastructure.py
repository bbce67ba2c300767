"""Infrastructure-specific exception classes."""

from .base import InfrastructureError, PresentationError


class RepositoryError(InfrastructureError):
    """Raised when the stock repository fails."""

    pass


class CSVExportError(PresentationError):
    """Raised when the CSV export cannot be written."""

    pass
