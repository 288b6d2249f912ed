"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.console import AdminConsole
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from tests.fakes import TEST_ACCESS_TOKEN, FakeBlobStorage, FakeSessionAuthority

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Unit of Work factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def authority() -> FakeSessionAuthority:
    return FakeSessionAuthority()


@pytest.fixture
def storage() -> FakeBlobStorage:
    return FakeBlobStorage()


@pytest.fixture
async def console(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    authority: FakeSessionAuthority,
    storage: FakeBlobStorage,
) -> AsyncGenerator[AdminConsole, None]:
    """A started console over the test database, nobody signed in."""
    console = AdminConsole(uow_factory, authority, storage)
    await console.start()
    yield console
    console.stop()


@pytest.fixture
async def signed_in_console(console: AdminConsole) -> AdminConsole:
    """The console after a successful operator sign-in."""
    assert await console.session.sign_in("admin@example.com", "secret")
    return console


@pytest.fixture
def app(
    console: AdminConsole,
    session_factory: async_sessionmaker[AsyncSession],
) -> Generator[FastAPI, None, None]:
    """Application wired to the test console and database."""
    from api.v1.dependencies import get_console
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_console] = lambda: console
    app.dependency_overrides[get_async_session] = override_get_async_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async test client (no auth header)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer header matching the fake authority's session token."""
    return {"Authorization": f"Bearer {TEST_ACCESS_TOKEN}"}


@pytest.fixture
async def authenticated_client(
    signed_in_console: AdminConsole,
    client: AsyncClient,
    auth_headers: dict[str, str],
) -> AsyncClient:
    """
    Test client for a signed-in operator.

    This client:
    - Uses an in-memory SQLite database through the real Unit of Work
    - Talks to a fake session authority and blob storage
    - Sends the session's access token on every request
    """
    client.headers.update(auth_headers)
    return client
