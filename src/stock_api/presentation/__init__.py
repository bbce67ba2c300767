"""Presentation layer for the stock API.

This layer handles HTTP requests, responses, and contains all FastAPI-related components.
"""

__all__ = []
