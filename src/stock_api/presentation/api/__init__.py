"""API router configuration for the stock API."""

from fastapi import APIRouter

from .endpoints import health, stocks

api_router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        500: {"description": "Internal Server Error"},
    },
)

api_router.include_router(stocks.router, prefix="/stocks", tags=["stocks"])
api_router.include_router(health.router, prefix="/health", tags=["health"])

__all__ = [
    "api_router",
]
