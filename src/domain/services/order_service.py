"""Order edit/delete handlers."""

from uuid import UUID

from core.exceptions import RecordNotFoundError
from domain.entities.console_state import OrderEdit
from domain.entities.outcomes import MutationResult
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.mutations import MutationHandler
from domain.services.view_state import Collection


class OrderService(MutationHandler):
    """Order header mutations. Success refreshes Orders only."""

    collection = Collection.ORDERS

    async def save_edit(self, edit: OrderEdit | None = None) -> MutationResult:
        """Submit an order edit form (status and header fields).

        Defaults to the open form. The open form is closed only if it is
        the one that was saved.
        """
        edit = edit or self._state.order_edit
        if edit is None:
            return self._invalid("No order is being edited")

        async def update(uow: IUnitOfWork) -> None:
            await uow.orders.update(
                edit.id,
                status=edit.status,
                total_amount=edit.total_amount,
                shipping_address=edit.shipping_address,
                payment_method=edit.payment_method,
            )

        failed = await self._write("order_update", edit.id, update)
        if failed:
            return failed

        refreshed = await self._refresh()
        if self._state.order_edit is edit:
            self._state.order_edit = None
        return MutationResult(ok=True, refreshed=refreshed, record_id=edit.id)

    async def delete(self, order_id: UUID) -> MutationResult:
        """Delete an order and its items."""

        async def delete(uow: IUnitOfWork) -> None:
            if not await uow.orders.delete(order_id):
                raise RecordNotFoundError("orders", str(order_id))

        failed = await self._write("order_delete", order_id, delete)
        if failed:
            return failed

        refreshed = await self._refresh()
        return MutationResult(ok=True, refreshed=refreshed, record_id=order_id)
