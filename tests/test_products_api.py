"""Integration tests for the product service (/products)."""

import uuid
from decimal import Decimal

import pytest


def _create(product_api, **overrides):
    payload = {"name": "Keyboard", "price": "199.99", "stock": 5, "category": "peripherals"}
    payload.update(overrides)
    return product_api.post("/products", json=payload)


class TestCreateProduct:
    def test_valid_payload_returns_201_with_generated_id(self, product_api):
        response = _create(product_api)

        assert response.status_code == 201
        body = response.json()
        uuid.UUID(body["id"])
        assert Decimal(body["price"]) == Decimal("199.99")

        fetched = product_api.get(f"/products/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Keyboard"

    @pytest.mark.parametrize("field", ["price", "stock"])
    def test_negative_values_are_rejected(self, product_api, field):
        response = _create(product_api, **{field: -1})

        assert response.status_code == 400
        assert product_api.get("/products").json() == []

    def test_name_is_required(self, product_api):
        response = product_api.post("/products", json={"price": 1, "stock": 1})
        assert response.status_code == 400

    def test_empty_name_is_rejected(self, product_api):
        assert _create(product_api, name="").status_code == 400


class TestReadProducts:
    def test_list_and_filter_by_category(self, product_api):
        _create(product_api, name="Keyboard", category="peripherals")
        _create(product_api, name="Monitor", category="displays")

        everything = product_api.get("/products").json()
        displays = product_api.get("/products", params={"category": "displays"}).json()

        assert {p["name"] for p in everything} == {"Keyboard", "Monitor"}
        assert [p["name"] for p in displays] == ["Monitor"]

    def test_unknown_id_is_404(self, product_api):
        assert product_api.get(f"/products/{uuid.uuid4()}").status_code == 404

    def test_malformed_id_is_400(self, product_api):
        assert product_api.get("/products/not-an-id").status_code == 400


class TestUpdateProduct:
    def test_partial_update(self, product_api):
        product = _create(product_api).json()

        response = product_api.put(f"/products/{product['id']}", json={"stock": 0, "price": "150"})

        assert response.status_code == 200
        body = response.json()
        assert body["stock"] == 0
        assert Decimal(body["price"]) == Decimal("150")
        assert body["name"] == "Keyboard"

    def test_negative_stock_is_rejected(self, product_api):
        product = _create(product_api).json()

        response = product_api.put(f"/products/{product['id']}", json={"stock": -3})

        assert response.status_code == 400
        assert product_api.get(f"/products/{product['id']}").json()["stock"] == 5

    def test_null_name_is_rejected(self, product_api):
        product = _create(product_api).json()
        response = product_api.put(f"/products/{product['id']}", json={"name": None})
        assert response.status_code == 400

    def test_update_unknown_product(self, product_api):
        response = product_api.put(f"/products/{uuid.uuid4()}", json={"stock": 1})
        assert response.status_code == 404


class TestDeleteProduct:
    def test_delete(self, product_api):
        product = _create(product_api).json()

        response = product_api.delete(f"/products/{product['id']}")

        assert response.status_code == 200
        assert product_api.get(f"/products/{product['id']}").status_code == 404

    def test_delete_unknown_product(self, product_api):
        assert product_api.delete(f"/products/{uuid.uuid4()}").status_code == 404
