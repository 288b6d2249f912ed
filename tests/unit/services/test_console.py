"""Unit tests for the console's derived views and navigation."""

from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from domain.entities.console_state import ConsoleTab
from domain.entities.order import Order
from domain.entities.product import Product
from domain.entities.profile import Profile
from domain.services.console import AdminConsole
from domain.services.view_state import Collection
from tests.fakes import FakeBlobStorage, FakeSessionAuthority, make_session
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
async def console(uow: FakeUnitOfWork) -> AdminConsole:
    console = AdminConsole(
        lambda: uow, FakeSessionAuthority(make_session()), FakeBlobStorage()
    )
    await console.start()
    return console


class TestOrdersView:
    @pytest.mark.asyncio
    async def test_none_without_selection(self, console: AdminConsole) -> None:
        assert console.orders_view is None

    @pytest.mark.asyncio
    async def test_view_user_orders_switches_tab(
        self, console: AdminConsole, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        mine = Order(user_id=user_id, total_amount=Decimal("5"))
        uow.orders.list_with_items.return_value = [
            mine,
            Order(user_id=uuid4(), total_amount=Decimal("7")),
        ]
        await console.store.refresh(Collection.ORDERS)

        result = console.view_user_orders(user_id)

        assert result == [mine]
        assert console.orders_view == [mine]
        assert console.state.active_tab == ConsoleTab.ORDERS

    @pytest.mark.asyncio
    async def test_recomputed_when_orders_refresh(
        self, console: AdminConsole, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        console.view_user_orders(user_id)
        assert console.orders_view == []

        new_order = Order(user_id=user_id, total_amount=Decimal("3"))
        uow.orders.list_with_items.return_value = [new_order]
        await console.store.refresh(Collection.ORDERS)

        assert console.orders_view == [new_order]

    @pytest.mark.asyncio
    async def test_profile_delete_leaves_orders_view_stale(
        self, console: AdminConsole, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        """Only the profiles snapshot is refetched after a profile delete."""
        order = Order(user_id=user_id, total_amount=Decimal("9"))
        uow.orders.list_with_items.return_value = [order]
        await console.store.refresh(Collection.ORDERS)
        console.view_user_orders(user_id)
        uow.profiles.delete.return_value = True
        uow.orders.list_with_items.return_value = []

        result = await console.profile_service.delete(user_id)

        assert result.ok
        assert console.orders_view == [order]

    @pytest.mark.asyncio
    async def test_show_tab_drops_selection(
        self, console: AdminConsole, user_id: UUID
    ) -> None:
        console.view_user_orders(user_id)

        console.show_tab(ConsoleTab.PRODUCTS)

        assert console.state.active_tab == ConsoleTab.PRODUCTS
        assert console.orders_view is None


class TestEditForms:
    @pytest.mark.asyncio
    async def test_open_profile_edit_copies_snapshot_row(
        self, console: AdminConsole, uow: FakeUnitOfWork
    ) -> None:
        profile = Profile(username="jdoe", full_name="Jane Doe", age=40)
        uow.profiles.list_all.return_value = [profile]
        await console.store.refresh(Collection.PROFILES)

        edit = console.open_profile_edit(profile.id)

        assert edit is not None
        assert edit.full_name == "Jane Doe"
        assert console.state.profile_edit is edit

        console.cancel_profile_edit()
        assert console.state.profile_edit is None

    @pytest.mark.asyncio
    async def test_open_edit_for_unknown_id(self, console: AdminConsole) -> None:
        assert console.open_product_edit(uuid4()) is None
        assert console.open_order_edit(uuid4()) is None
        assert console.state.product_edit is None

    @pytest.mark.asyncio
    async def test_open_product_edit_keeps_image_path(
        self, console: AdminConsole, uow: FakeUnitOfWork
    ) -> None:
        product = Product(name="Lamp", image_path="lamp.png")
        uow.products.list_all.return_value = [product]
        await console.store.refresh(Collection.PRODUCTS)

        edit = console.open_product_edit(product.id)

        assert edit is not None
        assert edit.image_path == "lamp.png"
        assert edit.image is None
