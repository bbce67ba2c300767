"""Infrastructure layer: logging and persistence adapters."""
