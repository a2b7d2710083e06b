from sqlalchemy import Column, String, DateTime, Numeric

from storefront.data.database import Base
from storefront.data.models._columns import new_id, utcnow


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), nullable=False, index=True)
    user_id = Column(String(64), nullable=False, index=True)

    amount = Column(Numeric(12, 2), nullable=False)
    method = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, index=True, default="Pending")  # PaymentStatus values
    transaction_ref = Column(String(64), nullable=False, unique=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
