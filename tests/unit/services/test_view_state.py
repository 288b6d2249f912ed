"""Unit tests for the snapshot store."""

from decimal import Decimal
from uuid import UUID

import pytest

from core.exceptions import AppException, DataGatewayError, ErrorCode
from domain.entities.order import Order
from domain.entities.product import Product
from domain.entities.profile import Profile
from domain.services.view_state import Collection, ViewStateStore
from tests.unit.conftest import FakeUnitOfWork


class TestCollectionParse:
    def test_parses_known_name(self) -> None:
        assert Collection.parse("orders") is Collection.ORDERS

    def test_rejects_unknown_name(self) -> None:
        with pytest.raises(AppException) as exc_info:
            Collection.parse("customers")
        assert exc_info.value.error_code == ErrorCode.INVALID_COLLECTION


class TestViewStateStoreRefresh:
    @pytest.mark.asyncio
    async def test_starts_empty(self, store: ViewStateStore) -> None:
        assert store.profiles == ()
        assert store.products == ()
        assert store.orders == ()
        assert store.version(Collection.PROFILES) == 0

    @pytest.mark.asyncio
    async def test_replaces_snapshot_wholesale(
        self, store: ViewStateStore, uow: FakeUnitOfWork
    ) -> None:
        uow.profiles.list_all.return_value = [Profile(username="a"), Profile(username="b")]
        await store.refresh(Collection.PROFILES)

        uow.profiles.list_all.return_value = [Profile(username="c")]
        ok = await store.refresh(Collection.PROFILES)

        assert ok
        assert [p.username for p in store.profiles] == ["c"]
        assert store.version(Collection.PROFILES) == 2

    @pytest.mark.asyncio
    async def test_only_touches_requested_collection(
        self, store: ViewStateStore, uow: FakeUnitOfWork
    ) -> None:
        uow.products.list_all.return_value = [Product(name="Lamp", price=Decimal("9.99"))]

        await store.refresh(Collection.PRODUCTS)

        uow.products.list_all.assert_awaited_once()
        uow.profiles.list_all.assert_not_called()
        uow.orders.list_with_items.assert_not_called()
        assert store.version(Collection.ORDERS) == 0

    @pytest.mark.asyncio
    async def test_orders_are_fetched_with_items(
        self, store: ViewStateStore, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.orders.list_with_items.return_value = [
            Order(user_id=user_id, total_amount=Decimal("10"))
        ]

        await store.refresh(Collection.ORDERS)

        assert len(store.orders) == 1
        assert store.snapshot(Collection.ORDERS) == store.orders

    @pytest.mark.asyncio
    async def test_failed_refresh_keeps_last_known_good(
        self, store: ViewStateStore, uow: FakeUnitOfWork
    ) -> None:
        uow.profiles.list_all.return_value = [Profile(username="kept")]
        await store.refresh(Collection.PROFILES)

        uow.profiles.list_all.side_effect = DataGatewayError("connection reset")
        ok = await store.refresh(Collection.PROFILES)

        assert not ok
        assert [p.username for p in store.profiles] == ["kept"]
        assert store.version(Collection.PROFILES) == 1
        assert store.last_error(Collection.PROFILES) == "connection reset"

    @pytest.mark.asyncio
    async def test_success_clears_last_error(
        self, store: ViewStateStore, uow: FakeUnitOfWork
    ) -> None:
        uow.products.list_all.side_effect = DataGatewayError("down")
        await store.refresh(Collection.PRODUCTS)

        uow.products.list_all.side_effect = None
        await store.refresh(Collection.PRODUCTS)

        assert store.last_error(Collection.PRODUCTS) is None

    @pytest.mark.asyncio
    async def test_refresh_all_reports_each_collection(
        self, store: ViewStateStore, uow: FakeUnitOfWork
    ) -> None:
        uow.orders.list_with_items.side_effect = DataGatewayError("down")

        results = await store.refresh_all()

        assert results == {
            Collection.PROFILES: True,
            Collection.PRODUCTS: True,
            Collection.ORDERS: False,
        }


class TestViewStateStoreClearAndListeners:
    @pytest.mark.asyncio
    async def test_clear_empties_everything(
        self, store: ViewStateStore, uow: FakeUnitOfWork
    ) -> None:
        uow.profiles.list_all.return_value = [Profile()]
        uow.products.list_all.return_value = [Product(name="Mug")]
        await store.refresh_all()

        store.clear()

        assert store.profiles == ()
        assert store.products == ()
        assert store.orders == ()

    @pytest.mark.asyncio
    async def test_listeners_hear_replacements(
        self, store: ViewStateStore
    ) -> None:
        seen: list[Collection] = []
        store.subscribe(seen.append)

        await store.refresh(Collection.ORDERS)
        store.clear()

        assert seen == [
            Collection.ORDERS,
            Collection.PROFILES,
            Collection.PRODUCTS,
            Collection.ORDERS,
        ]

    @pytest.mark.asyncio
    async def test_listeners_skip_failed_refresh(
        self, store: ViewStateStore, uow: FakeUnitOfWork
    ) -> None:
        seen: list[Collection] = []
        store.subscribe(seen.append)
        uow.orders.list_with_items.side_effect = DataGatewayError("down")

        await store.refresh(Collection.ORDERS)

        assert seen == []

    def test_unsubscribe(self, store: ViewStateStore) -> None:
        seen: list[Collection] = []
        unsubscribe = store.subscribe(seen.append)

        unsubscribe()
        store.clear()

        assert seen == []
