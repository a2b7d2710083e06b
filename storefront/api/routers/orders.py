# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from storefront.api.errors import translate_errors
from storefront.data.database import get_db
from storefront.domain.schemas import MessageOut, OrderCreate, OrderOut, OrderStatusUpdate
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(request: Request, db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db, cart_client=request.app.state.cart_client)


@router.get("", response_model=List[OrderOut])
def list_orders(svc: OrderService = Depends(get_service)):
    with translate_errors():
        return svc.list_orders()


@router.post("", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, svc: OrderService = Depends(get_service)):
    """
    Creates an order from the user's cart and deletes the cart afterwards.
    """
    with translate_errors():
        return svc.create_order(payload.user_id)


@router.get("/user/{user_id}", response_model=List[OrderOut])
def list_user_orders(user_id: str, svc: OrderService = Depends(get_service)):
    with translate_errors():
        return svc.list_by_user(user_id)


@router.get("/status/{status}", response_model=List[OrderOut])
def list_orders_by_status(status: str, svc: OrderService = Depends(get_service)):
    with translate_errors():
        return svc.list_by_status(status)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, svc: OrderService = Depends(get_service)):
    with translate_errors():
        return svc.get_order(order_id)


@router.put("/{order_id}/status", response_model=OrderOut)
def update_order_status(order_id: str, payload: OrderStatusUpdate, svc: OrderService = Depends(get_service)):
    with translate_errors():
        return svc.update_status(order_id, payload.status)


@router.delete("/{order_id}", response_model=MessageOut)
def delete_order(order_id: str, svc: OrderService = Depends(get_service)):
    with translate_errors():
        svc.delete_order(order_id)
        return MessageOut(message="Order deleted")
