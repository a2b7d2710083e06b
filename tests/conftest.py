import os

os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from storefront.api import create_app
from storefront.data.database import Base, build_engine, build_session_factory
from storefront.services.cart_client import CartClient
from storefront.services.order_client import OrderClient
from storefront.services.payment_gateway import SimulatedGateway

DB_URL = "sqlite://"
JWT_SECRET = "test-secret"


@pytest.fixture()
def db():
    engine = build_engine(DB_URL)
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture()
def user_api():
    return TestClient(create_app("user", database_url=DB_URL, jwt_secret=JWT_SECRET))


@pytest.fixture()
def product_api():
    return TestClient(create_app("product", database_url=DB_URL))


@pytest.fixture()
def cart_api():
    return TestClient(create_app("cart", database_url=DB_URL))


@pytest.fixture()
def order_api(cart_api):
    app = create_app("order", database_url=DB_URL)
    # checkout talks to the in-process cart service
    app.state.cart_client = CartClient(base_url="http://testserver", session=cart_api)
    return TestClient(app)


@pytest.fixture()
def payment_api(order_api):
    app = create_app("payment", database_url=DB_URL)
    app.state.order_client = OrderClient(base_url="http://testserver", session=order_api)
    app.state.gateway = SimulatedGateway(succeed=True)
    return TestClient(app)


def put_cart(cart_api, user_id, items):
    """Helper: POST /cart, items given as (product_id, quantity, price) tuples."""
    response = cart_api.post(
        "/cart",
        json={
            "userId": user_id,
            "items": [
                {"productId": p, "quantity": q, "price": price} for p, q, price in items
            ],
        },
    )
    assert response.status_code in (200, 201), response.text
    return response.json()


def checkout(cart_api, order_api, user_id, items=(("prod-1", 1, "10.00"),)):
    """Helper: fill the cart and turn it into an order, returns the order json."""
    put_cart(cart_api, user_id, items)
    response = order_api.post("/orders", json={"userId": user_id})
    assert response.status_code == 201, response.text
    return response.json()
