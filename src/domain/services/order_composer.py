"""Two-phase order submission: parent order, then its line item."""

from collections.abc import Callable

import structlog

from core.exceptions import AppException
from domain.entities.console_state import ConsoleState, OrderDraft
from domain.entities.order import Order, OrderItem
from domain.entities.outcomes import OrderComposition
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.view_state import Collection, ViewStateStore

logger = structlog.get_logger()


class OrderComposer:
    """Creates an order and its single item as two separate writes.

    The writes are not atomic. If the item insert fails after the order
    insert succeeded, the order is left in the store with no items (an
    orphan). No compensating delete and no retry is attempted; submitting
    again creates a second order.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        store: ViewStateStore,
        state: ConsoleState,
        default_payment_method: str = "COD",
    ) -> None:
        self._uow_factory = uow_factory
        self._store = store
        self._state = state
        self._default_payment_method = default_payment_method

    def reset_draft(self) -> None:
        self._state.order_draft = OrderDraft(payment_method=self._default_payment_method)

    async def submit(self) -> OrderComposition:
        """Submit the new-order form."""
        draft = self._state.order_draft
        if draft.user_id is None:
            return self._rejected("An order needs an owning profile")
        if draft.product_id is None:
            return self._rejected("An order item needs a product")
        if draft.quantity < 1:
            return self._rejected("Quantity must be a positive integer")

        # Phase 1: parent order
        order = Order(
            user_id=draft.user_id,
            total_amount=draft.total_amount,
            shipping_address=draft.shipping_address,
            payment_method=draft.payment_method,
        )
        try:
            async with self._uow_factory() as uow:
                created = await uow.orders.create(order)
                await uow.commit()
        except AppException as e:
            logger.error("order_insert_failed", user_id=str(draft.user_id), error=e.message)
            return OrderComposition(parent_created=False, item_created=False, error=e.message)

        logger.info("order_parent_created", order_id=str(created.id))

        # Phase 2: only ever issued once phase 1 returned a key
        item = OrderItem(
            order_id=created.id,
            product_id=draft.product_id,
            quantity=draft.quantity,
            price_at_purchase=draft.price_at_purchase,
            product_size=draft.product_size or None,
            product_color=draft.product_color or None,
        )
        try:
            async with self._uow_factory() as uow:
                created_item = await uow.order_items.create(item)
                await uow.commit()
        except AppException as e:
            logger.error(
                "order_item_insert_failed",
                order_id=str(created.id),
                orphan=True,
                error=e.message,
            )
            return OrderComposition(
                parent_created=True,
                item_created=False,
                order_id=created.id,
                error=e.message,
            )

        logger.info(
            "order_item_created",
            order_id=str(created.id),
            item_id=str(created_item.id),
        )

        refreshed = await self._store.refresh(Collection.ORDERS)
        self.reset_draft()
        return OrderComposition(
            parent_created=True,
            item_created=True,
            order_id=created.id,
            item_id=created_item.id,
            refreshed=refreshed,
        )

    @staticmethod
    def _rejected(reason: str) -> OrderComposition:
        logger.info("order_draft_rejected", reason=reason)
        return OrderComposition(parent_created=False, item_created=False, error=reason)
