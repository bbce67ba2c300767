"""Tests for the in-memory stock repository."""

import pytest

from stock_api.core.exceptions import InvalidStockError, RepositoryError
from stock_api.domain.repositories.stock_repository import NewStock


def new_stock(name: str = "Eraser", store_id: str = "store-1", price: int = 120, quantity: int = 10) -> NewStock:
    return NewStock(name=name, price=price, quantity=quantity, store_id=store_id, user_id="user-1")


@pytest.mark.asyncio
async def test_ids_are_sequential_across_stores(repository):
    first = await repository.create(new_stock(store_id="store-1"))
    second = await repository.create(new_stock(store_id="store-2"))

    assert (first.id, second.id) == (1, 2)


@pytest.mark.asyncio
async def test_list_by_store_orders_by_id_and_paginates(repository):
    for index in range(4):
        await repository.create(new_stock(name=f"item-{index}"))
    await repository.create(new_stock(name="elsewhere", store_id="store-2"))

    assert [s.name for s in await repository.list_by_store("store-1", limit=10)] == [
        "item-0",
        "item-1",
        "item-2",
        "item-3",
    ]
    assert [s.name for s in await repository.list_by_store("store-1", limit=2, offset=2)] == ["item-2", "item-3"]
    assert await repository.list_by_store("store-1", limit=10, offset=10) == []


@pytest.mark.asyncio
async def test_get_is_scoped_to_store(repository):
    stock = await repository.create(new_stock())

    assert await repository.get("store-1", stock.id) == stock
    assert await repository.get("store-2", stock.id) is None
    assert await repository.get("store-1", 999) is None


@pytest.mark.asyncio
async def test_create_many_stores_nothing_when_one_entry_is_invalid(repository):
    with pytest.raises(InvalidStockError):
        await repository.create_many([new_stock(name="ok"), new_stock(name="", price=1)])

    assert await repository.list_by_store("store-1", limit=10) == []


@pytest.mark.asyncio
async def test_update_missing_stock_raises(repository):
    stock = await repository.create(new_stock())
    await repository.delete("store-1", stock.id)

    with pytest.raises(RepositoryError):
        await repository.update(stock)


@pytest.mark.asyncio
async def test_delete_is_scoped_to_store(repository):
    stock = await repository.create(new_stock())

    assert await repository.delete("store-2", stock.id) is False
    assert await repository.delete("store-1", stock.id) is True
    assert await repository.delete("store-1", stock.id) is False
