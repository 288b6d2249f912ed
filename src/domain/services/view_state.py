"""In-memory snapshots of the three console collections."""

import asyncio
from collections.abc import Callable
from enum import StrEnum
from typing import Any

import structlog

from core.exceptions import AppException, InvalidCollectionError
from domain.entities.order import Order
from domain.entities.product import Product
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class Collection(StrEnum):
    """Snapshot collections held by the store."""

    PROFILES = "profiles"
    PRODUCTS = "products"
    ORDERS = "orders"

    @classmethod
    def parse(cls, name: str) -> "Collection":
        try:
            return cls(name)
        except ValueError:
            raise InvalidCollectionError(name) from None


SnapshotListener = Callable[[Collection], None]


class ViewStateStore:
    """Last-known-good snapshot of profiles, products and orders.

    ``refresh`` and ``clear`` are the only writers. A refresh replaces the
    whole snapshot of one collection or, on failure, leaves it untouched.
    Listeners run after every replace/clear so derived views can be
    recomputed.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory
        self._snapshots: dict[Collection, tuple[Any, ...]] = {c: () for c in Collection}
        self._versions: dict[Collection, int] = {c: 0 for c in Collection}
        self._errors: dict[Collection, str | None] = {c: None for c in Collection}
        self._listeners: list[SnapshotListener] = []

    # --- reads ---

    @property
    def profiles(self) -> tuple[Profile, ...]:
        return self._snapshots[Collection.PROFILES]

    @property
    def products(self) -> tuple[Product, ...]:
        return self._snapshots[Collection.PRODUCTS]

    @property
    def orders(self) -> tuple[Order, ...]:
        return self._snapshots[Collection.ORDERS]

    def snapshot(self, collection: Collection) -> tuple[Any, ...]:
        return self._snapshots[collection]

    def version(self, collection: Collection) -> int:
        """Number of times the snapshot has been replaced or cleared."""
        return self._versions[collection]

    def last_error(self, collection: Collection) -> str | None:
        """Message of the most recent failed refresh, cleared on success."""
        return self._errors[collection]

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- writes ---

    async def refresh(self, collection: Collection) -> bool:
        """Refetch one collection in full and replace its snapshot.

        Returns False (and keeps the previous snapshot) if the fetch fails.
        """
        try:
            async with self._uow_factory() as uow:
                if collection is Collection.PROFILES:
                    rows: list[Any] = await uow.profiles.list_all()
                elif collection is Collection.PRODUCTS:
                    rows = await uow.products.list_all()
                else:
                    rows = await uow.orders.list_with_items()
        except AppException as e:
            self._errors[collection] = e.message
            logger.error(
                "snapshot_refresh_failed",
                collection=collection.value,
                error=e.message,
            )
            return False

        self._replace(collection, tuple(rows))
        self._errors[collection] = None
        logger.debug("snapshot_refreshed", collection=collection.value, size=len(rows))
        return True

    async def refresh_all(self) -> dict[Collection, bool]:
        """Refresh the three collections concurrently."""
        collections = list(Collection)
        results = await asyncio.gather(*(self.refresh(c) for c in collections))
        return dict(zip(collections, results))

    def clear(self) -> None:
        """Empty every snapshot (used on sign-out)."""
        for collection in Collection:
            self._errors[collection] = None
            self._replace(collection, ())

    def _replace(self, collection: Collection, rows: tuple[Any, ...]) -> None:
        self._snapshots[collection] = rows
        self._versions[collection] += 1
        for listener in list(self._listeners):
            listener(collection)
