"""Stock use case DTOs."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GetStocksRequest(BaseModel):
    """Request DTO for listing the stocks of a store.

    ``limit=None`` asks for every stock; the use case caps it.
    """

    store_id: str = Field(..., min_length=1, description="Store whose stocks are listed")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of stocks")
    offset: int | None = Field(default=None, ge=0, description="Number of stocks to skip")


class CreateStockRequest(BaseModel):
    """Request DTO for creating a stock."""

    name: str = Field(..., min_length=1, max_length=100, description="Product name")
    quantity: int = Field(..., ge=0, description="Units in stock")
    price: int = Field(..., ge=0, description="Unit price in yen")
    store_id: str = Field(..., min_length=1, description="Owning store")
    user_id: str = Field(..., min_length=1, description="User creating the stock")


class UpdateStockRequest(CreateStockRequest):
    """Request DTO for updating a stock."""

    stock_id: int = Field(..., ge=1, description="Stock to update")
