# storefront/services/cart_service.py
from decimal import Decimal
from typing import Iterable, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import CartItem, CartOut, CartUpsert
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def total_amount(items: Iterable[CartItem]) -> Decimal:
    return sum((i.price * i.quantity for i in items), Decimal("0.00"))


class CartService:
    """
    One cart document per user.
    Prices in the cart are snapshots supplied by the client; nothing here
    checks them (or stock) against the product service.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    # query
    def get_cart(self, user_id: str) -> CartOut:
        cart = self.repo.get_by_user(user_id)
        if not cart:
            raise NotFoundError("Cart not found")
        return self._to_out(cart)

    # commands
    def upsert_cart(self, payload: CartUpsert) -> Tuple[CartOut, bool]:
        """Creates the user's cart or replaces its item list. Returns (cart, created)."""
        items = [i.model_dump(mode="json") for i in payload.items]
        existing = self.repo.get_by_user(payload.user_id)

        if existing:
            return self._replace(existing, items), False

        try:
            created = self.repo.create_cart(CartModel(user_id=payload.user_id, items=items))
        except IntegrityError:
            # a concurrent first POST for the same user created the cart meanwhile
            self.repo.rollback()
            existing = self.repo.get_by_user(payload.user_id)
            if not existing:
                raise
            return self._replace(existing, items), False

        logger.info(f"Created cart {created.id} for user {payload.user_id}")
        return self._to_out(created), True

    def _replace(self, cart: CartModel, items: list) -> CartOut:
        updated = self.repo.replace_items(cart, items)
        logger.info(f"Replaced items of cart {updated.id} for user {updated.user_id} ({len(items)} lines)")
        return self._to_out(updated)

    def delete_cart(self, user_id: str) -> bool:
        """Absent cart is fine, order checkout calls this after the fact."""
        cart = self.repo.get_by_user(user_id)
        if not cart:
            logger.info(f"No cart to delete for user {user_id}")
            return False

        self.repo.delete_cart(cart)
        logger.info(f"Deleted cart {cart.id} for user {user_id}")
        return True

    @staticmethod
    def _to_out(cart: CartModel) -> CartOut:
        items = [CartItem.model_validate(i) for i in cart.items or []]
        return CartOut(
            id=cart.id,
            user_id=cart.user_id,
            items=items,
            total_amount=total_amount(items),
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )
