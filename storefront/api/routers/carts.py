# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from storefront.api.errors import translate_errors
from storefront.data.database import get_db
from storefront.domain.schemas import CartDeleted, CartOut, CartUpsert
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(db)


@router.get("/{user_id}", response_model=CartOut)
def get_cart(user_id: str, svc: CartService = Depends(get_service)):
    with translate_errors():
        return svc.get_cart(user_id)


@router.post("", response_model=CartOut)
def upsert_cart(payload: CartUpsert, response: Response, svc: CartService = Depends(get_service)):
    """Creates the cart (201) or replaces the items of the existing one (200)."""
    with translate_errors():
        cart, created = svc.upsert_cart(payload)
        response.status_code = 201 if created else 200
        return cart


@router.delete("/{user_id}", response_model=CartDeleted)
def delete_cart(user_id: str, svc: CartService = Depends(get_service)):
    with translate_errors():
        deleted = svc.delete_cart(user_id)
        return CartDeleted(user_id=user_id, deleted=deleted)
