"""Order domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from uuid import UUID, uuid4


class OrderStatus(StrEnum):
    """Order lifecycle states. New orders start as PENDING."""

    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


@dataclass(frozen=True, slots=True)
class OrderItem:
    """Read-only line item. price_at_purchase is a point-in-time copy."""

    order_id: UUID
    product_id: UUID | None  # None once the product is deleted
    quantity: int
    price_at_purchase: Decimal
    id: UUID = field(default_factory=uuid4)
    product_size: str | None = None
    product_color: str | None = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("quantity must be a positive integer")


@dataclass
class Order:
    """Domain entity for an Order and its nested items."""

    user_id: UUID
    total_amount: Decimal
    shipping_address: str = ""
    payment_method: str = "COD"
    id: UUID = field(default_factory=uuid4)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=datetime.utcnow)
    items: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Coerce status strings coming back from the store."""
        self.status = OrderStatus(self.status)
        self.total_amount = Decimal(str(self.total_amount))
