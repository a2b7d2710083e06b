# storefront/domain/enums.py
import re
from enum import Enum

from storefront.domain.errors import InvalidRequestError


class _Choice(str, Enum):
    @classmethod
    def parse(cls, raw: str):
        """Turns a path/query value into a member, 400 for anything unknown."""
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            label = re.sub(r"(?<!^)(?=[A-Z])", " ", cls.__name__).lower()
            raise InvalidRequestError(f"Invalid {label}: {raw!r} (allowed: {allowed})") from None


class OrderStatus(_Choice):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


class PaymentStatus(_Choice):
    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    REFUNDED = "Refunded"


class PaymentMethod(_Choice):
    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    PAYPAL = "PayPal"
    BANK_TRANSFER = "Bank Transfer"
