"""Core stock entity for the domain layer"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from ...core.exceptions import InvalidStockError

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class Stock:
    """Inventory item owned by a store.

    Immutable: updates produce a new instance through ``with_changes``.
    """

    id: int
    name: str
    price: int
    quantity: int
    store_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate business rules on entity creation"""
        if not self.name or len(self.name) > MAX_NAME_LENGTH:
            raise InvalidStockError(
                f"Stock name must be between 1 and {MAX_NAME_LENGTH} characters",
                details={"name_length": len(self.name or "")},
            )
        if self.price < 0:
            raise InvalidStockError("Stock price must be zero or greater", details={"price": self.price})
        if self.quantity < 0:
            raise InvalidStockError("Stock quantity must be zero or greater", details={"quantity": self.quantity})
        if not self.store_id:
            raise InvalidStockError("Stock must belong to a store")

    def with_changes(self, *, name: str, price: int, quantity: int, user_id: str, updated_at: datetime) -> Stock:
        """Return a copy with new editable fields and a refreshed update time."""
        return replace(self, name=name, price=price, quantity=quantity, user_id=user_id, updated_at=updated_at)

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary representation for serialization"""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
            "store_id": self.store_id,
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
