# storefront/data/models/cart.py
from sqlalchemy import Column, String, DateTime, JSON

from storefront.data.database import Base
from storefront.data.models._columns import new_id, utcnow


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(String(36), primary_key=True, default=new_id)
    # one cart per user
    user_id = Column(String(64), nullable=False, unique=True, index=True)

    # [{"product_id": ..., "quantity": ..., "price": "12.50"}]
    items = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
