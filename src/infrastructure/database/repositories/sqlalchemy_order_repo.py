"""SQLAlchemy implementation of Order and OrderItem repositories."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.exceptions import RecordNotFoundError
from domain.entities.order import Order, OrderItem, OrderStatus
from infrastructure.database.models import OrderItemModel, OrderModel


class SQLAlchemyOrderRepository:
    """SQLAlchemy implementation of IOrderRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_with_items(self) -> list[Order]:
        """Select every order with its items eagerly loaded."""
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .order_by(OrderModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, order: Order) -> Order:
        """Insert an order header and return the stored row."""
        model = OrderModel(
            id=order.id,
            user_id=order.user_id,
            total_amount=order.total_amount,
            shipping_address=order.shipping_address,
            payment_method=order.payment_method,
            status=order.status.value,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model, attribute_names=["created_at"])
        # A freshly inserted header never has items
        return self._to_entity(model, items=[])

    async def update(
        self,
        id: UUID,
        *,
        status: OrderStatus,
        total_amount: Decimal,
        shipping_address: str,
        payment_method: str,
    ) -> Order:
        """Replace the editable header fields. Items are never touched."""
        model = await self._get_with_items(id)
        if not model:
            raise RecordNotFoundError("orders", str(id))

        model.status = status.value
        model.total_amount = total_amount
        model.shipping_address = shipping_address
        model.payment_method = payment_method

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete an order together with its items."""
        model = await self._get_with_items(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_with_items(self, id: UUID) -> OrderModel | None:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(
        model: OrderModel, items: list[OrderItem] | None = None
    ) -> Order:
        if items is None:
            items = [SQLAlchemyOrderItemRepository._to_entity(i) for i in model.items]
        return Order(
            id=model.id,
            user_id=model.user_id,
            total_amount=model.total_amount,
            shipping_address=model.shipping_address or "",
            payment_method=model.payment_method or "",
            status=model.status,
            created_at=model.created_at,
            items=items,
        )


class SQLAlchemyOrderItemRepository:
    """SQLAlchemy implementation of IOrderItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, item: OrderItem) -> OrderItem:
        """Insert a line item."""
        model = OrderItemModel(
            id=item.id,
            order_id=item.order_id,
            product_id=item.product_id,
            quantity=item.quantity,
            price_at_purchase=item.price_at_purchase,
            product_size=item.product_size,
            product_color=item.product_color,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: OrderItemModel) -> OrderItem:
        return OrderItem(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            quantity=model.quantity,
            price_at_purchase=model.price_at_purchase,
            product_size=model.product_size,
            product_color=model.product_color,
        )
