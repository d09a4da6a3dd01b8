"""Integration tests for the product stock API.

Covers:
- GET /products against the seeded in-memory store.
- POST /products/{id}/add-stocks and /remove-stocks (200, 404, 409),
  including additions past the largest storable quantity.
- Request validation (400) and route matching for non-integer ids.
- The same flows through the Django ORM store.
"""

from __future__ import annotations

import pytest

from modules.products.constants import MAX_QUANTITY_IN_STOCK
from modules.products.models import Product

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def peppers(django_store):
    """Products 4 and 5 persisted in the database, routed through the ORM store."""
    return [
        Product.objects.create(id=4, name="Ghost Pepper", quantity_in_stock=10),
        Product.objects.create(id=5, name="Carolina Reaper", quantity_in_stock=10),
    ]


def _post(client, url, amount):
    return client.post(url, {"amount": amount}, format="json")


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_lists_seed_products(self, api_client):
        response = api_client.get("/products")
        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "name": "Banana", "quantityInStock": 50},
            {"id": 2, "name": "Apple", "quantityInStock": 20},
            {"id": 3, "name": "Habanero Pepper", "quantityInStock": 10},
        ]

    def test_list_reflects_stock_changes(self, api_client):
        _post(api_client, "/products/2/remove-stocks", 5)
        response = api_client.get("/products")
        apple = next(p for p in response.json() if p["id"] == 2)
        assert apple["quantityInStock"] == 15


# ===========================================================================
# ADD STOCKS
# ===========================================================================


class TestAddStocks:
    def test_add_success(self, api_client):
        response = _post(api_client, "/products/1/add-stocks", 10)
        assert response.status_code == 200
        assert response.json() == {"quantityInStock": 60}

    def test_add_zero_is_noop(self, api_client):
        response = _post(api_client, "/products/3/add-stocks", 0)
        assert response.status_code == 200
        assert response.json() == {"quantityInStock": 10}

    def test_add_not_found_returns_404(self, api_client):
        response = _post(api_client, "/products/99/add-stocks", 1)
        assert response.status_code == 404
        assert response.json() == {
            "productId": 99,
            "message": "Product 99 not found.",
        }

    def test_add_past_limit_returns_409(self, api_client):
        response = _post(api_client, "/products/1/add-stocks", MAX_QUANTITY_IN_STOCK)
        assert response.status_code == 409
        assert response.json() == {
            "amountToAdd": MAX_QUANTITY_IN_STOCK,
            "quantityInStock": 50,
            "maxQuantityInStock": MAX_QUANTITY_IN_STOCK,
            "message": (
                f"Cannot add {MAX_QUANTITY_IN_STOCK} to product 1: "
                f"50 in stock, at most {MAX_QUANTITY_IN_STOCK} allowed."
            ),
        }

    def test_failed_add_leaves_stock_unchanged(self, api_client):
        _post(api_client, "/products/1/add-stocks", MAX_QUANTITY_IN_STOCK)
        response = _post(api_client, "/products/1/add-stocks", 0)
        assert response.json() == {"quantityInStock": 50}


# ===========================================================================
# REMOVE STOCKS
# ===========================================================================


class TestRemoveStocks:
    def test_remove_success(self, api_client):
        response = _post(api_client, "/products/1/remove-stocks", 20)
        assert response.status_code == 200
        assert response.json() == {"quantityInStock": 30}

    def test_remove_everything_returns_zero(self, api_client):
        response = _post(api_client, "/products/3/remove-stocks", 10)
        assert response.status_code == 200
        assert response.json() == {"quantityInStock": 0}

    def test_remove_too_much_returns_409(self, api_client):
        response = _post(api_client, "/products/3/remove-stocks", 11)
        assert response.status_code == 409
        data = response.json()
        assert data["amountToRemove"] == 11
        assert data["quantityInStock"] == 10
        assert data["message"]

    def test_failed_remove_leaves_stock_unchanged(self, api_client):
        _post(api_client, "/products/3/remove-stocks", 11)
        response = api_client.get("/products")
        habanero = next(p for p in response.json() if p["id"] == 3)
        assert habanero["quantityInStock"] == 10

    def test_remove_not_found_returns_404(self, api_client):
        response = _post(api_client, "/products/99/remove-stocks", 1)
        assert response.status_code == 404
        assert response.json()["productId"] == 99


# ===========================================================================
# VALIDATION
# ===========================================================================


class TestValidation:
    @pytest.mark.parametrize("action", ["add-stocks", "remove-stocks"])
    def test_negative_amount_returns_400(self, api_client, action):
        response = _post(api_client, f"/products/1/{action}", -1)
        assert response.status_code == 400
        assert "detail" in response.json()

    @pytest.mark.parametrize("action", ["add-stocks", "remove-stocks"])
    def test_amount_above_storable_range_returns_400(self, api_client, action):
        response = _post(api_client, f"/products/1/{action}", MAX_QUANTITY_IN_STOCK + 1)
        assert response.status_code == 400
        assert "detail" in response.json()

    @pytest.mark.parametrize("payload", [{}, {"amount": "ten"}, {"amount": 1.5}])
    def test_invalid_body_returns_400(self, api_client, payload):
        response = api_client.post("/products/1/add-stocks", payload, format="json")
        assert response.status_code == 400

    def test_malformed_json_returns_400(self, api_client):
        response = api_client.post(
            "/products/1/add-stocks", data="{", content_type="application/json"
        )
        assert response.status_code == 400

    def test_non_integer_id_does_not_match_route(self, api_client):
        response = _post(api_client, "/products/abc/add-stocks", 1)
        assert response.status_code == 404

    def test_get_not_allowed_on_stock_actions(self, api_client):
        response = api_client.get("/products/1/add-stocks")
        assert response.status_code == 405


# ===========================================================================
# DJANGO ORM STORE
# ===========================================================================


class TestDjangoStore:
    def test_list_reads_database(self, api_client, peppers):
        response = api_client.get("/products")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [4, 5]

    def test_add_stocks_persists(self, api_client, peppers):
        response = _post(api_client, "/products/4/add-stocks", 10)
        assert response.status_code == 200
        assert Product.objects.get(id=4).quantity_in_stock == 20

    def test_remove_stocks_to_zero_persists(self, api_client, peppers):
        response = _post(api_client, "/products/5/remove-stocks", 10)
        assert response.status_code == 200
        assert Product.objects.get(id=5).quantity_in_stock == 0

    def test_remove_too_much_does_not_persist(self, api_client, peppers):
        response = _post(api_client, "/products/5/remove-stocks", 11)
        assert response.status_code == 409
        assert Product.objects.get(id=5).quantity_in_stock == 10

    def test_not_found(self, api_client, peppers):
        response = _post(api_client, "/products/1/add-stocks", 1)
        assert response.status_code == 404

    def test_add_up_to_limit_persists(self, api_client, peppers):
        response = _post(api_client, "/products/4/add-stocks", MAX_QUANTITY_IN_STOCK - 10)
        assert response.status_code == 200
        assert response.json() == {"quantityInStock": MAX_QUANTITY_IN_STOCK}
        assert Product.objects.get(id=4).quantity_in_stock == MAX_QUANTITY_IN_STOCK

    def test_add_past_limit_does_not_persist(self, api_client, peppers):
        response = _post(api_client, "/products/4/add-stocks", MAX_QUANTITY_IN_STOCK)
        assert response.status_code == 409
        assert response.json()["maxQuantityInStock"] == MAX_QUANTITY_IN_STOCK
        assert Product.objects.get(id=4).quantity_in_stock == 10
