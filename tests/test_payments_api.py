"""Integration tests for the payment service (/payments), wired to live order and cart services."""

import uuid
from decimal import Decimal

import pytest

from storefront.services.payment_gateway import SimulatedGateway
from tests.conftest import checkout


def _pay(payment_api, order, amount=None, method="Credit Card"):
    return payment_api.post(
        "/payments",
        json={
            "orderId": order["id"],
            "userId": order["userId"],
            "amount": amount or order["totalAmount"],
            "method": method,
        },
    )


@pytest.fixture()
def order(cart_api, order_api):
    return checkout(cart_api, order_api, "user-1", [("prod-1", 2, "12.00")])


class TestCreatePayment:
    def test_completed_payment_moves_order_to_processing(self, payment_api, order_api, order):
        response = _pay(payment_api, order)

        assert response.status_code == 201
        payment = response.json()
        assert payment["status"] == "Completed"
        assert payment["method"] == "Credit Card"
        assert payment["transactionRef"].startswith("TXN-")
        assert Decimal(payment["amount"]) == Decimal("24.00")
        assert order_api.get(f"/orders/{order['id']}").json()["status"] == "Processing"

    @pytest.mark.parametrize("method", ["Debit Card", "PayPal", "Bank Transfer"])
    def test_every_method_is_accepted(self, payment_api, order, method):
        assert _pay(payment_api, order, method=method).json()["method"] == method

    def test_failed_payment_leaves_order_pending(self, payment_api, order_api, order):
        payment_api.app.state.gateway = SimulatedGateway(succeed=False)

        response = _pay(payment_api, order)

        assert response.status_code == 201
        assert response.json()["status"] == "Failed"
        assert order_api.get(f"/orders/{order['id']}").json()["status"] == "Pending"

    def test_amount_is_not_reconciled_with_order_total(self, payment_api, order):
        response = _pay(payment_api, order, amount="1.00")

        assert response.status_code == 201
        assert response.json()["status"] == "Completed"

    def test_unknown_method(self, payment_api, order):
        assert _pay(payment_api, order, method="Cash").status_code == 400
        assert payment_api.get("/payments").json() == []

    def test_non_positive_amount(self, payment_api, order):
        assert _pay(payment_api, order, amount="-5").status_code == 400

    def test_malformed_order_id(self, payment_api):
        response = payment_api.post(
            "/payments",
            json={"orderId": "abc", "userId": "user-1", "amount": "1", "method": "PayPal"},
        )
        assert response.status_code == 400

    def test_order_service_error_surfaces_as_500(self, payment_api):
        missing_order = str(uuid.uuid4())

        response = payment_api.post(
            "/payments",
            json={"orderId": missing_order, "userId": "user-1", "amount": "5", "method": "PayPal"},
        )

        assert response.status_code == 500
        # the payment itself was already recorded
        recorded = payment_api.get(f"/payments/order/{missing_order}").json()
        assert [p["status"] for p in recorded] == ["Completed"]


class TestRefund:
    def test_refund_completed_payment(self, payment_api, order_api, order):
        payment = _pay(payment_api, order).json()

        response = payment_api.put(f"/payments/{payment['id']}/refund")

        assert response.status_code == 200
        assert response.json()["status"] == "Refunded"
        assert order_api.get(f"/orders/{order['id']}").json()["status"] == "Processing"

    def test_refund_failed_payment_is_rejected(self, payment_api, order):
        payment_api.app.state.gateway = SimulatedGateway(succeed=False)
        payment = _pay(payment_api, order).json()

        response = payment_api.put(f"/payments/{payment['id']}/refund")

        assert response.status_code == 400
        assert "Cannot refund" in response.json()["detail"]
        assert payment_api.get(f"/payments/{payment['id']}").json() == payment

    def test_refund_twice(self, payment_api, order):
        payment = _pay(payment_api, order).json()
        payment_api.put(f"/payments/{payment['id']}/refund")

        response = payment_api.put(f"/payments/{payment['id']}/refund")

        assert response.status_code == 400
        assert payment_api.get(f"/payments/{payment['id']}").json()["status"] == "Refunded"

    def test_refund_unknown_payment(self, payment_api):
        assert payment_api.put(f"/payments/{uuid.uuid4()}/refund").status_code == 404


class TestQueries:
    def test_lookups(self, payment_api, cart_api, order_api, order):
        other_order = checkout(cart_api, order_api, "user-2")
        first = _pay(payment_api, order).json()
        second = _pay(payment_api, other_order).json()
        payment_api.put(f"/payments/{second['id']}/refund")

        assert len(payment_api.get("/payments").json()) == 2
        assert payment_api.get(f"/payments/{first['id']}").json()["id"] == first["id"]
        assert [p["id"] for p in payment_api.get(f"/payments/order/{order['id']}").json()] == [first["id"]]
        assert [p["id"] for p in payment_api.get("/payments/user/user-2").json()] == [second["id"]]
        assert [p["id"] for p in payment_api.get("/payments/status/Completed").json()] == [first["id"]]
        assert [p["id"] for p in payment_api.get("/payments/status/Refunded").json()] == [second["id"]]
        assert payment_api.get("/payments/status/Pending").json() == []

    def test_unknown_status(self, payment_api):
        assert payment_api.get("/payments/status/Settled").status_code == 400

    def test_unknown_payment(self, payment_api):
        assert payment_api.get(f"/payments/{uuid.uuid4()}").status_code == 404


class TestCreatePaymentValidation:
    @pytest.mark.parametrize("user_id", ["u" * 65, "team/ann"])
    def test_user_id_that_cannot_be_stored_is_rejected(self, payment_api, order, user_id):
        response = payment_api.post(
            "/payments",
            json={"orderId": order["id"], "userId": user_id, "amount": "1", "method": "PayPal"},
        )

        assert response.status_code == 400
        assert payment_api.get("/payments").json() == []
