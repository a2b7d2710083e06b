from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import InvalidRequestError, NotFoundError
from storefront.domain.ids import check_id
from storefront.domain.schemas import ProductCreate, ProductOut, ProductUpdate
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """Plain CRUD over the catalog, no calls to other services."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self, category: str | None = None) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.list_products(category)]

    def get_product(self, product_id: str) -> ProductOut:
        return ProductOut.model_validate(self._load(product_id))

    def create_product(self, payload: ProductCreate) -> ProductOut:
        created = self.repo.create_product(ProductModel(**payload.model_dump()))
        logger.info(f"Created product {created.id} ({created.name})")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: str, payload: ProductUpdate) -> ProductOut:
        product = self._load(product_id)
        changes = payload.model_dump(exclude_unset=True)

        # explicit nulls would break NOT NULL columns
        for field in ("name", "price", "stock"):
            if field in changes and changes[field] is None:
                raise InvalidRequestError(f"Field '{field}' cannot be null")

        updated = self.repo.update_product(product, changes)
        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return ProductOut.model_validate(updated)

    def delete_product(self, product_id: str):
        product = self._load(product_id)
        self.repo.delete_product(product)
        logger.info(f"Deleted product {product_id}")

    def _load(self, product_id: str) -> ProductModel:
        check_id(product_id, "product")
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product
