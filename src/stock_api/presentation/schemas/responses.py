"""Response schemas for API endpoints."""

from datetime import datetime

from pydantic import Field

from ...domain.entities.stock import Stock
from .common import BaseSchema


class StockResponse(BaseSchema):
    """A stock as returned by the API."""

    id: int = Field(..., description="Stock ID")
    name: str = Field(..., description="Product name")
    price: int = Field(..., description="Unit price in yen")
    quantity: int = Field(..., description="Units in stock")
    store_id: str = Field(..., description="Owning store")
    user_id: str = Field(..., description="Last user to change the stock")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, stock: Stock) -> "StockResponse":
        return cls(
            id=stock.id,
            name=stock.name,
            price=stock.price,
            quantity=stock.quantity,
            store_id=stock.store_id,
            user_id=stock.user_id,
            created_at=stock.created_at,
            updated_at=stock.updated_at,
        )


__all__ = [
    "StockResponse",
]
