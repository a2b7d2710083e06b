from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.payment import PaymentModel


class PaymentRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_payment(self, payment: PaymentModel) -> PaymentModel:
        self.db.add(payment)
        self.db.commit()
        self.db.refresh(payment)
        return payment

    def get_payment(self, payment_id: str) -> PaymentModel | None:
        return self.db.get(PaymentModel, payment_id)

    def list_payments(self, **filters) -> List[PaymentModel]:
        stmt = select(PaymentModel).filter_by(**filters).order_by(PaymentModel.created_at)
        return list(self.db.execute(stmt).scalars().all())

    def update_status(self, payment: PaymentModel, status: str) -> PaymentModel:
        payment.status = status
        self.db.commit()
        self.db.refresh(payment)
        return payment
