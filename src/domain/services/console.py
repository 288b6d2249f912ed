"""The admin console: snapshots, handlers and operator state in one place."""

from collections.abc import Callable
from uuid import UUID

from domain.entities.console_state import (
    ConsoleState,
    ConsoleTab,
    OrderEdit,
    ProductEdit,
    ProfileEdit,
)
from domain.entities.order import Order
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.order_composer import OrderComposer
from domain.services.order_service import OrderService
from domain.services.order_views import derive_orders_for_user
from domain.services.product_service import ProductService
from domain.services.profile_service import ProfileService
from domain.services.session_coordinator import SessionCoordinator
from domain.services.view_state import Collection, ViewStateStore
from infrastructure.auth.provider import ISessionAuthority
from infrastructure.storage.provider import IBlobStorage


class AdminConsole:
    """Owns one ViewStateStore and one ConsoleState and wires the handlers to them."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        authority: ISessionAuthority,
        storage: IBlobStorage,
        images_bucket: str = "product-images",
        default_payment_method: str = "COD",
    ) -> None:
        self.state = ConsoleState()
        self.store = ViewStateStore(uow_factory)
        self.session = SessionCoordinator(authority, self.store, self.state)
        self.composer = OrderComposer(
            uow_factory, self.store, self.state, default_payment_method
        )
        self.order_service = OrderService(uow_factory, self.store, self.state)
        self.profile_service = ProfileService(uow_factory, self.store, self.state)
        self.product_service = ProductService(
            uow_factory, self.store, self.state, storage, images_bucket
        )
        self.composer.reset_draft()

        self._orders_view: list[Order] = []
        self.store.subscribe(self._on_snapshot_change)

    async def start(self) -> None:
        await self.session.start()

    def stop(self) -> None:
        self.session.stop()

    # --- derived views ---

    @property
    def orders_view(self) -> list[Order] | None:
        """Orders of the selected profile, or None when nothing is selected."""
        if self.state.selected_user_id is None:
            return None
        return self._orders_view

    def _recompute_orders_view(self) -> None:
        self._orders_view = derive_orders_for_user(
            self.store.orders, self.state.selected_user_id
        )

    def _on_snapshot_change(self, collection: Collection) -> None:
        if collection is Collection.ORDERS:
            self._recompute_orders_view()

    # --- navigation ---

    def view_user_orders(self, user_id: UUID) -> list[Order]:
        self.state.selected_user_id = user_id
        self.state.active_tab = ConsoleTab.ORDERS
        self._recompute_orders_view()
        return self._orders_view

    def show_tab(self, tab: ConsoleTab) -> None:
        self.state.active_tab = tab
        self.state.selected_user_id = None
        self._recompute_orders_view()

    # --- edit forms ---

    def open_profile_edit(self, profile_id: UUID) -> ProfileEdit | None:
        profile = next((p for p in self.store.profiles if p.id == profile_id), None)
        self.state.profile_edit = ProfileEdit.from_profile(profile) if profile else None
        return self.state.profile_edit

    def cancel_profile_edit(self) -> None:
        self.state.profile_edit = None

    def open_product_edit(self, product_id: UUID) -> ProductEdit | None:
        product = next((p for p in self.store.products if p.id == product_id), None)
        self.state.product_edit = ProductEdit.from_product(product) if product else None
        return self.state.product_edit

    def cancel_product_edit(self) -> None:
        self.state.product_edit = None

    def open_order_edit(self, order_id: UUID) -> OrderEdit | None:
        order = next((o for o in self.store.orders if o.id == order_id), None)
        self.state.order_edit = OrderEdit.from_order(order) if order else None
        return self.state.order_edit

    def cancel_order_edit(self) -> None:
        self.state.order_edit = None
