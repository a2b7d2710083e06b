# storefront/services/payment_gateway.py
import uuid

from storefront.data.models.payment import PaymentModel
from storefront.domain.enums import PaymentStatus
from storefront.utils.logging import get_logger
from storefront.utils.settings import PAYMENT_SIMULATE_SUCCESS

logger = get_logger(__name__)


def new_transaction_ref() -> str:
    return f"TXN-{uuid.uuid4().hex[:16].upper()}"


class SimulatedGateway:
    """
    No real processor behind this. The outcome is fixed per process
    (PAYMENT_SIMULATE_SUCCESS), so the same request always ends the same way.
    """

    def __init__(self, succeed: bool | None = None):
        self.succeed = PAYMENT_SIMULATE_SUCCESS if succeed is None else succeed

    def charge(self, payment: PaymentModel) -> PaymentStatus:
        outcome = PaymentStatus.COMPLETED if self.succeed else PaymentStatus.FAILED
        logger.info(
            f"[GATEWAY] {payment.method} charge of {payment.amount} "
            f"({payment.transaction_ref}) -> {outcome.value}"
        )
        return outcome
