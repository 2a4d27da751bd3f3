"""Integration tests for Cashier API endpoints."""

import pytest
from fastapi.testclient import TestClient


def test_list_cashiers(test_client: TestClient):
    """Test GET /cashiers - seeded cashiers, without orders."""
    response = test_client.get("/api/cashiers")

    assert response.status_code == 200
    data = response.json()
    assert [c["fullName"] for c in data] == ["Ernie Fairchild", "Lana Lopez"]
    assert all(c["orders"] is None for c in data)

    # camelCase keys only
    assert set(data[0]) == {"id", "firstName", "lastName", "fullName", "orders"}


def test_create_cashier(test_client: TestClient):
    """Test POST /cashiers endpoint."""
    response = test_client.post("/api/cashiers", json={"firstName": "Maya", "lastName": "Okafor"})

    assert response.status_code == 201, f"Expected 201, got {response.status_code}: {response.text}"
    data = response.json()
    assert data["id"] == 3
    assert data["fullName"] == "Maya Okafor"
    assert data["orders"] is None
    assert response.headers["location"] == "/api/cashiers/3"

    # A new cashier has an empty (not missing) order list
    get_response = test_client.get("/api/cashiers/3")
    assert get_response.status_code == 200
    assert get_response.json()["orders"] == []


def test_create_cashier_missing_last_name(test_client: TestClient):
    response = test_client.post("/api/cashiers", json={"firstName": "Maya"})

    assert response.status_code == 422


def test_get_cashier_with_orders(test_client: TestClient):
    """Test GET /cashiers/{id} - orders, lines and products nested."""
    response = test_client.get("/api/cashiers/1")

    assert response.status_code == 200
    data = response.json()
    assert data["fullName"] == "Ernie Fairchild"
    assert [o["id"] for o in data["orders"]] == [1]

    order = data["orders"][0]
    assert order["cashier"] is None
    assert [line["product"]["productName"] for line in order["orderProducts"]] == ["Cola", "Chips"]
    assert order["total"] == pytest.approx(4.0)


def test_get_cashier_products_carry_no_category(test_client: TestClient):
    data = test_client.get("/api/cashiers/2").json()

    lines = data["orders"][0]["orderProducts"]
    assert all(line["product"]["category"] is None for line in lines)
    assert data["orders"][0]["total"] == pytest.approx(5.75)


def test_new_order_shows_under_cashier(test_client: TestClient):
    test_client.post(
        "/api/orders",
        json={"cashierId": 2, "orderProducts": [{"productId": 2, "quantity": 4}]},
    )

    orders = test_client.get("/api/cashiers/2").json()["orders"]

    assert [o["id"] for o in orders] == [2, 3]
    assert orders[1]["total"] == pytest.approx(6.0)


def test_get_cashier_not_found(test_client: TestClient):
    """Test GET /cashiers/{id} with a non-existent id."""
    response = test_client.get("/api/cashiers/999")

    assert response.status_code == 404
    assert response.content == b""
