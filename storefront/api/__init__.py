# storefront/api/__init__.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from storefront.api.errors import validation_error_handler
from storefront.api.routers import auth, carts, health, orders, payments, products
from storefront.data.database import Base, build_engine, build_session_factory
from storefront.data.seed import seed_products
from storefront.services.cart_client import CartClient
from storefront.services.order_client import OrderClient
from storefront.services.payment_gateway import SimulatedGateway
from storefront.utils import settings
from storefront.utils.logging import get_logger

# register every model on Base.metadata before create_all
import storefront.data.models  # noqa: F401

logger = get_logger(__name__)

SERVICES = {
    "user": ("User Service", [auth.router]),
    "product": ("Product Service", [products.router]),
    "cart": ("Cart Service", [carts.router]),
    "order": ("Order Service", [orders.router]),
    "payment": ("Payment Service", [payments.router]),
}


def create_app(service: str, database_url: str | None = None, jwt_secret: str | None = None) -> FastAPI:
    """
    Builds the app for one service. The engine and the clients for other
    services are created here, once, and reach handlers through app.state.
    """
    if service not in SERVICES:
        raise RuntimeError(f"Unknown service {service!r}, expected one of {sorted(SERVICES)}")

    database_url = database_url or settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL is not set")

    title, routers = SERVICES[service]
    app = FastAPI(title=title, version="1.0.0")
    app.state.service = service

    if service == "user":
        app.state.jwt_secret = jwt_secret or settings.JWT_SECRET
        if not app.state.jwt_secret:
            raise RuntimeError("JWT_SECRET is not set")

    engine = build_engine(database_url)
    logger.info(f"Initializing database for {title}: {sorted(Base.metadata.tables)}")
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    if service == "order":
        app.state.cart_client = CartClient()
    elif service == "payment":
        app.state.order_client = OrderClient()
        app.state.gateway = SimulatedGateway()
    elif service == "product" and settings.SEED_PRODUCTS:
        with app.state.session_factory() as db:
            seed_products(db)

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router)
    for router in routers:
        app.include_router(router)

    logger.info(f"{title} ready")
    return app
