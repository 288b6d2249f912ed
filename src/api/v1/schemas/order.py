"""Pydantic schemas for Order API."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.order import OrderStatus


class OrderCreate(BaseModel):
    """New order with its single line item."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "total_amount": "250.00",
                "shipping_address": "123 Main",
                "payment_method": "COD",
                "product_id": "456e4567-e89b-12d3-a456-426614174000",
                "quantity": 2,
                "price_at_purchase": "125.00",
            }
        }
    )

    user_id: UUID
    total_amount: Decimal = Field(Decimal("0"), ge=0)
    shipping_address: str = ""
    payment_method: str = "COD"
    product_id: UUID
    quantity: int = Field(1, ge=1)
    price_at_purchase: Decimal = Field(Decimal("0"), ge=0)
    product_size: str = ""
    product_color: str = ""


class OrderUpdate(BaseModel):
    """Full replacement of an order's editable header fields."""

    status: OrderStatus
    total_amount: Decimal = Field(..., ge=0)
    shipping_address: str = ""
    payment_method: str = ""


class OrderItemResponse(BaseModel):
    """Schema for a nested order item."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    order_id: UUID
    product_id: UUID | None = None
    quantity: int
    price_at_purchase: Decimal
    product_size: str | None = None
    product_color: str | None = None


class OrderResponse(BaseModel):
    """Schema for an order with its items."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    total_amount: Decimal
    shipping_address: str
    payment_method: str
    status: OrderStatus
    created_at: datetime
    items: list[OrderItemResponse]


class OrderListResponse(BaseModel):
    """Schema for a list of orders."""

    data: list[OrderResponse]


class UserOrdersResponse(BaseModel):
    """Orders owned by one profile, in snapshot order."""

    user_id: UUID
    data: list[OrderResponse]


class OrderCompositionResponse(BaseModel):
    """Outcome of a fully successful order submission."""

    parent_created: bool
    item_created: bool
    order_id: UUID | None = None
    item_id: UUID | None = None
    refreshed: bool
    data: OrderResponse | None = None
