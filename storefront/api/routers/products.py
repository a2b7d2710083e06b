# storefront/api/routers/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.errors import translate_errors
from storefront.data.database import get_db
from storefront.domain.schemas import MessageOut, ProductCreate, ProductOut, ProductUpdate
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


@router.get("", response_model=List[ProductOut])
def list_products(category: Optional[str] = None, svc: ProductService = Depends(get_service)):
    with translate_errors():
        return svc.list_products(category)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(payload: ProductCreate, svc: ProductService = Depends(get_service)):
    with translate_errors():
        return svc.create_product(payload)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, svc: ProductService = Depends(get_service)):
    with translate_errors():
        return svc.get_product(product_id)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: str, payload: ProductUpdate, svc: ProductService = Depends(get_service)):
    with translate_errors():
        return svc.update_product(product_id, payload)


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(product_id: str, svc: ProductService = Depends(get_service)):
    with translate_errors():
        svc.delete_product(product_id)
        return MessageOut(message="Product deleted")
