# storefront/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Keyboard", "price": Decimal("199.99"), "stock": 25, "category": "peripherals"},
    {"name": "Mouse", "price": Decimal("49.50"), "stock": 60, "category": "peripherals"},
    {"name": "Monitor", "price": Decimal("899.00"), "stock": 10, "category": "displays"},
]


def seed_products(db: Session) -> int:
    repo = ProductRepo(db)
    # not forcing: only seed if empty
    if repo.count():
        return 0
    for data in SAMPLE_PRODUCTS:
        repo.create_product(ProductModel(**data))
    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} products")
    return len(SAMPLE_PRODUCTS)
