# storefront/services/payment_service.py
from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.payment import PaymentModel
from storefront.domain.enums import OrderStatus, PaymentStatus
from storefront.domain.errors import InvalidRequestError, NotFoundError
from storefront.domain.ids import check_id
from storefront.domain.schemas import PaymentCreate, PaymentOut
from storefront.repos.payment_repo import PaymentRepo
from storefront.services.order_client import OrderClient
from storefront.services.payment_gateway import SimulatedGateway, new_transaction_ref
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentService:
    def __init__(self, db: Session, order_client: OrderClient, gateway: SimulatedGateway):
        self.repo = PaymentRepo(db)
        self.order_client = order_client
        self.gateway = gateway

    def create_payment(self, payload: PaymentCreate) -> PaymentOut:
        """
        Use Case: pay for an order.

        The payment is stored as Pending, charged, then stored with the outcome.
        A completed payment moves the order to Processing in the order service.
        The amount is taken as given, it is not compared with the order total.
        """
        check_id(payload.order_id, "order")

        payment = self.repo.create_payment(
            PaymentModel(
                order_id=payload.order_id,
                user_id=payload.user_id,
                amount=payload.amount,
                method=payload.method.value,
                status=PaymentStatus.PENDING.value,
                transaction_ref=new_transaction_ref(),
            )
        )

        outcome = self.gateway.charge(payment)
        payment = self.repo.update_status(payment, outcome.value)
        logger.info(f"Payment {payment.id} for order {payment.order_id}: {outcome.value}")

        if outcome is PaymentStatus.COMPLETED:
            self.order_client.update_status(payment.order_id, OrderStatus.PROCESSING)

        return PaymentOut.model_validate(payment)

    def refund(self, payment_id: str) -> PaymentOut:
        """Only completed payments; the order status and stock are left alone."""
        payment = self._load(payment_id)

        if payment.status != PaymentStatus.COMPLETED.value:
            raise InvalidRequestError(f"Cannot refund payment with status {payment.status}")

        refunded = self.repo.update_status(payment, PaymentStatus.REFUNDED.value)
        logger.info(f"Payment {payment_id} refunded")
        return PaymentOut.model_validate(refunded)

    def list_payments(self) -> List[PaymentOut]:
        return [PaymentOut.model_validate(p) for p in self.repo.list_payments()]

    def list_by_order(self, order_id: str) -> List[PaymentOut]:
        return [PaymentOut.model_validate(p) for p in self.repo.list_payments(order_id=order_id)]

    def list_by_user(self, user_id: str) -> List[PaymentOut]:
        return [PaymentOut.model_validate(p) for p in self.repo.list_payments(user_id=user_id)]

    def list_by_status(self, status: str) -> List[PaymentOut]:
        wanted = PaymentStatus.parse(status)
        return [PaymentOut.model_validate(p) for p in self.repo.list_payments(status=wanted.value)]

    def get_payment(self, payment_id: str) -> PaymentOut:
        return PaymentOut.model_validate(self._load(payment_id))

    def _load(self, payment_id: str) -> PaymentModel:
        check_id(payment_id, "payment")
        payment = self.repo.get_payment(payment_id)
        if not payment:
            raise NotFoundError("Payment not found")
        return payment
