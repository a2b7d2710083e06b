# storefront/services/order_service.py
from typing import List

from requests import RequestException
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.enums import OrderStatus
from storefront.domain.errors import InvalidRequestError, NotFoundError, UpstreamError
from storefront.domain.ids import check_id
from storefront.domain.schemas import OrderOut
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_client import CartClient
from storefront.services.cart_service import total_amount
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Orders are created from the user's cart, which lives in the cart service.
    Status changes are written as asked; there is no transition table.
    """

    def __init__(self, db: Session, cart_client: CartClient):
        self.repo = OrderRepo(db)
        self.cart_client = cart_client

    def create_order(self, user_id: str) -> OrderOut:
        """
        Use Case: checkout.

        1. Fetch the cart from the cart service
        2. Refuse an absent or empty cart
        3. Total = sum of quantity * price snapshot (prices are not re-read)
        4. Persist the order as Pending
        5. Delete the cart, a failure here does not undo the order
        """
        cart = self.cart_client.fetch_cart(user_id)

        if cart is None or not cart.items:
            raise InvalidRequestError("Cart is empty")

        order = OrderModel(
            user_id=user_id,
            items=[i.model_dump(mode="json") for i in cart.items],
            total_amount=total_amount(cart.items),
            status=OrderStatus.PENDING.value,
        )
        created = self.repo.create_order(order)

        logger.info(f"Order {created.id} created from cart {cart.id}, total {created.total_amount}")

        self._discard_cart(user_id, created.id)

        return OrderOut.model_validate(created)

    def _discard_cart(self, user_id: str, order_id: str):
        try:
            self.cart_client.delete_cart(user_id)
        except (RequestException, UpstreamError) as e:
            # order stays committed; the stale cart can be checked out again
            logger.error(
                f"Cart of user {user_id} not deleted after order {order_id}, "
                f"left for manual cleanup: {e}"
            )

    def list_orders(self) -> List[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.list_orders()]

    def list_by_user(self, user_id: str) -> List[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.list_orders(user_id=user_id)]

    def list_by_status(self, status: str) -> List[OrderOut]:
        wanted = OrderStatus.parse(status)
        return [OrderOut.model_validate(o) for o in self.repo.list_orders(status=wanted.value)]

    def get_order(self, order_id: str) -> OrderOut:
        return OrderOut.model_validate(self._load(order_id))

    def update_status(self, order_id: str, status: OrderStatus) -> OrderOut:
        order = self._load(order_id)
        current = OrderStatus(order.status)

        if current.is_terminal and status != current:
            logger.warning(f"Order {order_id} leaves terminal status {current.value} for {status.value}")

        updated = self.repo.update_order_status(order, status.value)
        logger.info(f"Order {order_id} status {current.value} -> {status.value}")
        return OrderOut.model_validate(updated)

    def delete_order(self, order_id: str):
        order = self._load(order_id)
        self.repo.delete_order(order)
        logger.info(f"Order {order_id} deleted")

    def _load(self, order_id: str) -> OrderModel:
        check_id(order_id, "order")
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Order not found")
        return order
