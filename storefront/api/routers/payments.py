# storefront/api/routers/payments.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from storefront.api.errors import translate_errors
from storefront.data.database import get_db
from storefront.domain.schemas import PaymentCreate, PaymentOut
from storefront.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


def get_service(request: Request, db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(
        db,
        order_client=request.app.state.order_client,
        gateway=request.app.state.gateway,
    )


@router.get("", response_model=List[PaymentOut])
def list_payments(svc: PaymentService = Depends(get_service)):
    with translate_errors():
        return svc.list_payments()


@router.post("", response_model=PaymentOut, status_code=201)
def create_payment(payload: PaymentCreate, svc: PaymentService = Depends(get_service)):
    with translate_errors():
        return svc.create_payment(payload)


@router.get("/order/{order_id}", response_model=List[PaymentOut])
def list_order_payments(order_id: str, svc: PaymentService = Depends(get_service)):
    with translate_errors():
        return svc.list_by_order(order_id)


@router.get("/user/{user_id}", response_model=List[PaymentOut])
def list_user_payments(user_id: str, svc: PaymentService = Depends(get_service)):
    with translate_errors():
        return svc.list_by_user(user_id)


@router.get("/status/{status}", response_model=List[PaymentOut])
def list_payments_by_status(status: str, svc: PaymentService = Depends(get_service)):
    with translate_errors():
        return svc.list_by_status(status)


@router.get("/{payment_id}", response_model=PaymentOut)
def get_payment(payment_id: str, svc: PaymentService = Depends(get_service)):
    with translate_errors():
        return svc.get_payment(payment_id)


@router.put("/{payment_id}/refund", response_model=PaymentOut)
def refund_payment(payment_id: str, svc: PaymentService = Depends(get_service)):
    with translate_errors():
        return svc.refund(payment_id)
