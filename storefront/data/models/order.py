from sqlalchemy import Column, String, DateTime, Numeric, JSON

from storefront.data.database import Base
from storefront.data.models._columns import new_id, utcnow


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(64), nullable=False, index=True)

    # snapshot of the cart lines at checkout, never rewritten
    items = Column(JSON, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, index=True, default="Pending")  # OrderStatus values

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
