"""Integration tests for the health endpoint and generic error handling."""

from fastapi.testclient import TestClient


def test_health_check(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_unknown_route(test_client: TestClient):
    response = test_client.get("/api/registers")

    assert response.status_code == 404


def test_openapi_lists_store_routes(test_client: TestClient):
    paths = test_client.get("/openapi.json").json()["paths"]

    assert {
        "/api/cashiers",
        "/api/cashiers/{cashier_id}",
        "/api/products",
        "/api/products/{product_id}",
        "/api/categories",
        "/api/orders",
        "/api/orders/{order_id}",
    } <= set(paths)
