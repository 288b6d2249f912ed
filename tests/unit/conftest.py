"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.console_state import ConsoleState
from domain.services.view_state import ViewStateStore


class FakeUnitOfWork:
    """Fake Unit of Work with all 4 repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.products = AsyncMock()
        self.orders = AsyncMock()
        self.order_items = AsyncMock()
        self.commits = 0
        self.rolled_back = False

        # Empty collections unless a test says otherwise
        self.profiles.list_all.return_value = []
        self.products.list_all.return_value = []
        self.orders.list_with_items.return_value = []

    @property
    def committed(self) -> bool:
        return self.commits > 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def store(uow: FakeUnitOfWork) -> ViewStateStore:
    return ViewStateStore(lambda: uow)


@pytest.fixture
def state() -> ConsoleState:
    return ConsoleState(loading=False)


@pytest.fixture
def user_id() -> UUID:
    """A random profile ID."""
    return uuid4()


@pytest.fixture
def product_id() -> UUID:
    """A random product ID."""
    return uuid4()
