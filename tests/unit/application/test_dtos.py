"""Tests for application layer DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from stock_api.application.dtos.stock_dtos import CreateStockRequest, GetStocksRequest, UpdateStockRequest


class TestGetStocksRequest:
    """Test GetStocksRequest DTO."""

    def test_defaults(self):
        request = GetStocksRequest(store_id="store-1")

        assert request.limit is None
        assert request.offset is None

    @pytest.mark.parametrize("field", ["limit", "offset"])
    def test_negative_values_are_rejected(self, field):
        with pytest.raises(ValidationError):
            GetStocksRequest(store_id="store-1", **{field: -1})

    def test_store_id_is_required(self):
        with pytest.raises(ValidationError):
            GetStocksRequest(store_id="")


class TestCreateStockRequest:
    """Test CreateStockRequest DTO."""

    def test_valid_request(self):
        request = CreateStockRequest(name="付箋 75mm", quantity=0, price=0, store_id="store-1", user_id="user-1")

        assert request.name == "付箋 75mm"
        assert request.price == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"name": "x" * 101},
            {"price": -1},
            {"quantity": -1},
            {"user_id": ""},
        ],
    )
    def test_invalid_values(self, overrides):
        values = {"name": "Pen", "quantity": 1, "price": 100, "store_id": "store-1", "user_id": "user-1"}
        values.update(overrides)

        with pytest.raises(ValidationError):
            CreateStockRequest(**values)


def test_update_request_requires_positive_id():
    with pytest.raises(ValidationError):
        UpdateStockRequest(stock_id=0, name="Pen", quantity=1, price=100, store_id="store-1", user_id="user-1")
