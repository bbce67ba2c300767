"""End-to-end tests for the stock endpoints."""

import csv
import io
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from freezegun import freeze_time

from stock_api.application.interfaces.stock_usecase_interface import StockUseCaseInterface
from stock_api.core.config.config import Settings
from stock_api.core.dependencies import get_stock_use_case
from stock_api.core.exceptions import StockUseCaseError
from stock_api.presentation.app import create_app

pytestmark = pytest.mark.integration


def create(client, **body) -> dict:
    response = client.post("/stocks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateAndRead:
    def test_create_returns_stock_with_context(self, client, stock_payload):
        response = client.post("/stocks", json=stock_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["name"] == "ボールペン 黒"
        assert body["store_id"] == "store-1"
        assert body["user_id"] == "user-1"
        assert body["created_at"] == body["updated_at"]

    def test_body_store_id_wins_when_auth_is_disabled(self, client, stock_payload):
        body = create(client, **stock_payload, store_id="store-7", user_id="user-3")

        assert (body["store_id"], body["user_id"]) == ("store-7", "user-3")

    def test_get_single_stock(self, client, stock_payload):
        created = create(client, **stock_payload)

        response = client.get(f"/stocks/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_list_is_paginated_and_store_scoped(self, client, stock_payload):
        for index in range(3):
            create(client, **{**stock_payload, "name": f"item-{index}"})
        client.post("/stocks", json=stock_payload, headers={"X-Store-ID": "store-2"})

        everything = client.get("/stocks").json()
        page = client.get("/stocks", params={"limit": 1, "offset": 1}).json()
        other = client.get("/stocks", headers={"X-Store-ID": "store-2"}).json()

        assert [s["name"] for s in everything] == ["item-0", "item-1", "item-2"]
        assert [s["name"] for s in page] == ["item-1"]
        assert len(other) == 1
        assert client.get("/stocks", params={"limit": 0}).json() == []

    def test_list_defaults_to_page_limit(self, settings, repository, stock_payload):
        small = settings.model_copy(update={"DEFAULT_PAGE_LIMIT": 2})
        with TestClient(create_app(settings=small, repository=repository)) as client:
            for _ in range(3):
                create(client, **stock_payload)

            assert len(client.get("/stocks").json()) == 2
            assert len(client.get("/stocks", params={"limit": 3}).json()) == 3

    def test_bulk_create_returns_ids(self, client, stock_payload):
        response = client.post("/stocks/bulk", json=[stock_payload, {**stock_payload, "name": "消しゴム"}])

        assert response.status_code == 201
        assert response.json() == [1, 2]
        assert len(client.get("/stocks").json()) == 2


class TestUpdateAndDelete:
    def test_update_replaces_fields(self, client, stock_payload):
        created = create(client, **stock_payload)

        response = client.put(f"/stocks/{created['id']}", json={"name": "ボールペン 赤", "price": 1300, "quantity": 5})

        assert response.status_code == 200
        body = response.json()
        assert (body["name"], body["price"], body["quantity"]) == ("ボールペン 赤", 1300, 5)
        assert body["created_at"] == created["created_at"]

    def test_delete_then_get_fails(self, client, stock_payload):
        created = create(client, **stock_payload)

        response = client.delete(f"/stocks/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/stocks/{created['id']}").status_code == 500


class TestValidation:
    @pytest.mark.parametrize(
        "method,path,kwargs",
        [
            ("get", "/stocks", {"params": {"limit": -1}}),
            ("get", "/stocks", {"params": {"limit": "abc"}}),
            ("get", "/stocks", {"params": {"offset": -5}}),
            ("get", "/stocks/0", {}),
            ("get", "/stocks/abc", {}),
            ("post", "/stocks", {"json": {"name": "Pen", "price": -1, "quantity": 1}}),
            ("post", "/stocks", {"json": {"name": "", "price": 1, "quantity": 1}}),
            ("post", "/stocks", {"json": {"name": "x" * 101, "price": 1, "quantity": 1}}),
            ("post", "/stocks", {"json": {"name": "Pen", "price": 1}}),
            ("post", "/stocks/bulk", {"json": []}),
            ("put", "/stocks/1", {"json": {"name": "Pen", "price": 1, "quantity": -3}}),
            ("delete", "/stocks/0", {}),
        ],
    )
    def test_invalid_requests_return_400(self, client, method, path, kwargs):
        response = getattr(client, method)(path, **kwargs)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] is True
        assert body["error_code"] == "validation_error"
        assert body["details"]["validation_errors"]

    def test_malformed_json_returns_400(self, client):
        response = client.post("/stocks", content=b"{not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "validation_error"


class TestUseCaseFailures:
    @pytest.mark.parametrize(
        "method,path,kwargs",
        [
            ("get", "/stocks/42", {}),
            ("put", "/stocks/42", {"json": {"name": "Pen", "price": 1, "quantity": 1}}),
            ("delete", "/stocks/42", {}),
        ],
    )
    def test_missing_stock_returns_500(self, client, method, path, kwargs):
        response = getattr(client, method)(path, **kwargs)

        assert response.status_code == 500
        assert response.json()["error_code"] == "internal_server_error"

    def test_failing_use_case_returns_500(self, app, client):
        use_case = MagicMock(spec=StockUseCaseInterface)
        use_case.get_stocks = AsyncMock(side_effect=StockUseCaseError("get_stocks failed: database is down"))
        app.dependency_overrides[get_stock_use_case] = lambda: use_case

        listing = client.get("/stocks")
        export = client.get("/stocks/csv")

        assert listing.status_code == 500
        assert listing.json()["message"] == "get_stocks failed: database is down"
        assert export.status_code == 500
        assert export.json()["error_code"] == "internal_server_error"


class TestCSVExport:
    def test_download_formats_rows(self, client):
        create(client, name="=SUM(A1)", price=1234567, quantity=3)
        create(client, name="Pen, blue", price=80, quantity=0)

        with freeze_time("2024-08-01 12:34:56", real_asyncio=True):
            response = client.get("/stocks/csv")

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/csv; charset=utf-8"
        assert response.headers["content-disposition"] == 'attachment; filename="stocks_20240801_123456.csv"'

        rows = list(csv.reader(io.StringIO(response.content.decode("utf-8"))))
        assert rows == [
            ["ID", "商品名", "価格", "在庫数", "作成日時", "更新日時"],
            ["1", "'=SUM(A1)", "1,234,567", "3", "2024/08/01 09:30:00", "2024/08/01 09:30:00"],
            ["2", "Pen, blue", "80", "0", "2024/08/01 09:30:00", "2024/08/01 09:30:00"],
        ]

    def test_empty_store_downloads_header_only(self, client):
        response = client.get("/stocks/csv")

        assert response.status_code == 200
        assert response.text == "ID,商品名,価格,在庫数,作成日時,更新日時\r\n"


class TestServiceEndpoints:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "development"

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "online"

    def test_request_id_header(self, client):
        assert client.get("/stocks", headers={"X-Request-ID": "abc"}).headers["X-Request-ID"] == "abc"


class TestAuthenticatedStores:
    KEY_A = {"Authorization": "Bearer key-a"}
    KEY_B = {"Authorization": "Bearer key-b"}

    @pytest.fixture
    def secured_client(self, repository):
        secured = Settings(
            ENVIRONMENT="development",
            AUTH_ENABLED=True,
            API_KEYS={"key-a": "store-a:alice", "key-b": "store-b:bob"},
            LOG_FORMAT="text",
            LOG_FILE_ENABLED=False,
        )
        with TestClient(create_app(settings=secured, repository=repository)) as client:
            yield client

    @pytest.mark.parametrize(
        "headers",
        [
            {},
            {"Authorization": "key-a"},
            {"Authorization": "Token key-a"},
            {"Authorization": "Bearer nope"},
        ],
    )
    def test_stocks_require_a_known_key(self, secured_client, headers):
        response = secured_client.get("/stocks", headers=headers)

        assert response.status_code == 401
        assert response.json()["error_code"] == "unauthorized"

    def test_key_scopes_reads_to_its_store(self, secured_client, stock_payload):
        created = secured_client.post("/stocks", json=stock_payload, headers=self.KEY_A).json()

        assert (created["store_id"], created["user_id"]) == ("store-a", "alice")
        assert [s["id"] for s in secured_client.get("/stocks", headers=self.KEY_A).json()] == [created["id"]]
        assert secured_client.get("/stocks", headers=self.KEY_B).json() == []
        assert secured_client.get(f"/stocks/{created['id']}", headers=self.KEY_B).status_code == 500
        assert secured_client.get("/stocks/csv", headers=self.KEY_B).text.count("\r\n") == 1

    def test_header_overrides_are_ignored(self, secured_client, stock_payload):
        response = secured_client.post(
            "/stocks", json=stock_payload, headers={**self.KEY_A, "X-Store-ID": "store-b", "X-User-ID": "bob"}
        )

        assert (response.json()["store_id"], response.json()["user_id"]) == ("store-a", "alice")

    def test_body_user_id_is_replaced_by_key_owner(self, secured_client, stock_payload):
        response = secured_client.post(
            "/stocks", json={**stock_payload, "store_id": "store-a", "user_id": "mallory"}, headers=self.KEY_A
        )

        assert response.status_code == 201
        assert response.json()["user_id"] == "alice"

    def test_create_in_other_store_is_refused(self, secured_client, stock_payload):
        response = secured_client.post("/stocks", json={**stock_payload, "store_id": "store-b"}, headers=self.KEY_A)

        assert response.status_code == 403
        assert response.json()["error_code"] == "forbidden"
        assert secured_client.get("/stocks", headers=self.KEY_B).json() == []

    def test_bulk_create_in_other_store_is_refused(self, secured_client, stock_payload):
        response = secured_client.post(
            "/stocks/bulk",
            json=[stock_payload, {**stock_payload, "store_id": "store-b"}],
            headers=self.KEY_A,
        )

        assert response.status_code == 403
        assert secured_client.get("/stocks", headers=self.KEY_A).json() == []
        assert secured_client.get("/stocks", headers=self.KEY_B).json() == []

    def test_update_in_other_store_is_refused(self, secured_client, stock_payload):
        target = secured_client.post("/stocks", json=stock_payload, headers=self.KEY_B).json()
        change = {"name": "overwritten", "price": 1, "quantity": 1}

        named = secured_client.put(f"/stocks/{target['id']}", json={**change, "store_id": "store-b"}, headers=self.KEY_A)
        unnamed = secured_client.put(f"/stocks/{target['id']}", json=change, headers=self.KEY_A)
        deleted = secured_client.delete(f"/stocks/{target['id']}", headers=self.KEY_A)

        assert named.status_code == 403
        assert unnamed.status_code == 500
        assert deleted.status_code == 500
        assert secured_client.get(f"/stocks/{target['id']}", headers=self.KEY_B).json() == target
