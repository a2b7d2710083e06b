# storefront/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from storefront.domain.enums import OrderStatus, PaymentMethod, PaymentStatus

# fits the String(64) user_id columns; no "/" so it stays one path segment
UserId = Annotated[str, Field(min_length=1, max_length=64, pattern=r"^[^/]+$")]


class CamelModel(BaseModel):
    """JSON goes out (and may come in) as camelCase, Python keeps snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageOut(CamelModel):
    message: str


# --- users -------------------------------------------------------------------

class UserRegister(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    role: Literal["user", "admin"] = "user"


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRead(CamelModel):
    id: str
    name: str
    email: EmailStr
    role: str
    created_at: datetime


class TokenOut(CamelModel):
    token: str
    token_type: str = "bearer"


# --- products ----------------------------------------------------------------

class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(0, ge=0)
    category: Optional[str] = Field(None, max_length=100)


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[str] = Field(None, max_length=100)


class ProductOut(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    price: Decimal
    stock: int
    category: Optional[str] = None
    created_at: datetime
    updated_at: datetime


# --- carts -------------------------------------------------------------------

class CartItem(CamelModel):
    """One cart line, `price` is the unit price captured when it was added."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class CartUpsert(CamelModel):
    user_id: UserId
    items: List[CartItem] = Field(default_factory=list)


class CartOut(CamelModel):
    id: str
    user_id: str
    items: List[CartItem]
    total_amount: Decimal
    created_at: datetime
    updated_at: datetime


class CartDeleted(CamelModel):
    user_id: str
    deleted: bool


# --- orders ------------------------------------------------------------------

class OrderCreate(CamelModel):
    user_id: UserId


class OrderStatusUpdate(CamelModel):
    status: OrderStatus


class OrderOut(CamelModel):
    id: str
    user_id: str
    items: List[CartItem]
    total_amount: Decimal
    status: OrderStatus
    created_at: datetime
    updated_at: datetime


# --- payments ----------------------------------------------------------------

class PaymentCreate(CamelModel):
    order_id: str = Field(..., min_length=1)
    user_id: UserId
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    method: PaymentMethod


class PaymentOut(CamelModel):
    id: str
    order_id: str
    user_id: str
    amount: Decimal
    method: PaymentMethod
    status: PaymentStatus
    transaction_ref: str
    created_at: datetime
    updated_at: datetime
