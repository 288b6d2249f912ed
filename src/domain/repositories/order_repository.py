"""Order and order item repository protocols."""

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from domain.entities.order import Order, OrderItem, OrderStatus


class IOrderRepository(Protocol):
    """Repository interface for the orders collection."""

    async def list_with_items(self) -> list[Order]:
        """Select every order with its nested order items."""
        ...

    async def create(self, order: Order) -> Order:
        """Insert an order and return the stored row (with its key)."""
        ...

    async def update(
        self,
        id: UUID,
        *,
        status: OrderStatus,
        total_amount: Decimal,
        shipping_address: str,
        payment_method: str,
    ) -> Order:
        """Replace the header fields of the stored order.

        Raises RecordNotFoundError when no order has that id.
        """
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an order and return success status."""
        ...


class IOrderItemRepository(Protocol):
    """Repository interface for the order_items collection (write-only)."""

    async def create(self, item: OrderItem) -> OrderItem:
        """Insert a line item for an already persisted order."""
        ...
