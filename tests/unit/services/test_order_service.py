"""Unit tests for order header mutations."""

from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from core.exceptions import DataGatewayError, ErrorCode, RecordNotFoundError
from domain.entities.console_state import ConsoleState, OrderEdit
from domain.entities.order import Order, OrderStatus
from domain.services.order_service import OrderService
from domain.services.view_state import ViewStateStore
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(
    uow: FakeUnitOfWork, store: ViewStateStore, state: ConsoleState
) -> OrderService:
    return OrderService(lambda: uow, store, state)


@pytest.fixture
def existing_order(user_id: UUID) -> Order:
    return Order(
        user_id=user_id,
        total_amount=Decimal("250.00"),
        shipping_address="123 Main",
    )


class TestOrderServiceSaveEdit:
    @pytest.mark.asyncio
    async def test_updates_status_and_refreshes_orders(
        self,
        service: OrderService,
        uow: FakeUnitOfWork,
        state: ConsoleState,
        existing_order: Order,
    ) -> None:
        state.order_edit = OrderEdit.from_order(existing_order)
        state.order_edit.status = OrderStatus.SHIPPED

        result = await service.save_edit()

        assert result.ok
        uow.orders.update.assert_awaited_once_with(
            existing_order.id,
            status=OrderStatus.SHIPPED,
            total_amount=Decimal("250.00"),
            shipping_address="123 Main",
            payment_method="COD",
        )
        uow.orders.list_with_items.assert_awaited_once()
        uow.profiles.list_all.assert_not_called()
        assert state.order_edit is None

    @pytest.mark.asyncio
    async def test_failure_keeps_form(
        self,
        service: OrderService,
        uow: FakeUnitOfWork,
        state: ConsoleState,
        existing_order: Order,
    ) -> None:
        state.order_edit = OrderEdit.from_order(existing_order)
        uow.orders.update.side_effect = DataGatewayError("check violation")

        result = await service.save_edit()

        assert not result.ok
        assert result.record_id == existing_order.id
        assert state.order_edit is not None
        uow.orders.list_with_items.assert_not_called()


    @pytest.mark.asyncio
    async def test_saves_given_form_without_snapshot_row(
        self, service: OrderService, uow: FakeUnitOfWork, state: ConsoleState
    ) -> None:
        edit = OrderEdit(
            id=uuid4(),
            status=OrderStatus.CANCELLED,
            total_amount=Decimal("10.00"),
            shipping_address="",
            payment_method="COD",
        )

        result = await service.save_edit(edit)

        assert result.ok
        assert uow.orders.update.call_args.args == (edit.id,)
        assert uow.orders.update.call_args.kwargs["status"] == OrderStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_leaves_a_different_open_form(
        self,
        service: OrderService,
        state: ConsoleState,
        existing_order: Order,
    ) -> None:
        saved = OrderEdit.from_order(existing_order)
        other = OrderEdit.from_order(existing_order)
        state.order_edit = other

        result = await service.save_edit(saved)

        assert result.ok
        assert state.order_edit is other

    @pytest.mark.asyncio
    async def test_missing_order_is_not_found(
        self, service: OrderService, uow: FakeUnitOfWork, existing_order: Order
    ) -> None:
        uow.orders.update.side_effect = RecordNotFoundError("orders", str(existing_order.id))

        result = await service.save_edit(OrderEdit.from_order(existing_order))

        assert not result.ok
        assert result.error_code == ErrorCode.RECORD_NOT_FOUND
        uow.orders.list_with_items.assert_not_called()


class TestOrderServiceDelete:
    @pytest.mark.asyncio
    async def test_deletes_and_refreshes(
        self, service: OrderService, uow: FakeUnitOfWork
    ) -> None:
        order_id = uuid4()
        uow.orders.delete.return_value = True

        result = await service.delete(order_id)

        assert result.ok
        uow.orders.delete.assert_awaited_once_with(order_id)
        uow.orders.list_with_items.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_order(self, service: OrderService, uow: FakeUnitOfWork) -> None:
        uow.orders.delete.return_value = False

        result = await service.delete(uuid4())

        assert not result.ok
        assert result.error_code == ErrorCode.RECORD_NOT_FOUND
