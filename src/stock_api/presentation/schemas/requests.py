"""Request schemas for API endpoints."""

from pydantic import Field

from .common import BaseSchema


class StockCreateRequest(BaseSchema):
    """Body for creating a stock.

    ``store_id`` and ``user_id`` fall back to the caller's store context
    when omitted or empty.
    """

    name: str = Field(..., min_length=1, max_length=100, description="Product name", examples=["Notebook A5"])
    price: int = Field(..., ge=0, description="Unit price in yen", examples=[1280])
    quantity: int = Field(..., ge=0, description="Units in stock", examples=[40])
    store_id: str | None = Field(None, max_length=64, description="Owning store")
    user_id: str | None = Field(None, max_length=64, description="User making the change")


class StockUpdateRequest(StockCreateRequest):
    """Body for updating a stock."""

    pass


__all__ = [
    "StockCreateRequest",
    "StockUpdateRequest",
]
