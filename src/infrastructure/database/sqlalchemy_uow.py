"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

import asyncpg
import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import DataGatewayError
from infrastructure.database.repositories.sqlalchemy_order_repo import (
    SQLAlchemyOrderItemRepository,
    SQLAlchemyOrderRepository,
)
from infrastructure.database.repositories.sqlalchemy_product_repo import SQLAlchemyProductRepository
from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository

logger = structlog.get_logger()

# Connect failures and timeouts (OSError covers asyncio.TimeoutError) reach
# us unwrapped when the pool opens its first connection.
GATEWAY_ERRORS: tuple[type[BaseException], ...] = (
    SQLAlchemyError,
    OSError,
    asyncpg.PostgresError,
)


def _describe(exc: BaseException) -> str:
    """Prefer the driver's message over SQLAlchemy's wrapper text."""
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    return message or type(exc).__name__


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    Any SQLAlchemy error, or connection-level failure of the driver, raised
    inside the block (or by commit) is re-raised as ``DataGatewayError``
    after rolling back.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def profiles(self) -> SQLAlchemyProfileRepository:
        """Get profile repository."""
        return SQLAlchemyProfileRepository(self._require_session())

    @property
    def products(self) -> SQLAlchemyProductRepository:
        """Get product repository."""
        return SQLAlchemyProductRepository(self._require_session())

    @property
    def orders(self) -> SQLAlchemyOrderRepository:
        """Get order repository."""
        return SQLAlchemyOrderRepository(self._require_session())

    @property
    def order_items(self) -> SQLAlchemyOrderItemRepository:
        """Get order item repository."""
        return SQLAlchemyOrderItemRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            try:
                await self._session.commit()
            except GATEWAY_ERRORS as e:
                raise DataGatewayError(_describe(e), operation="commit") from e

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager, translating driver errors, and cleanup."""
        if not self._session:
            return
        try:
            if exc_type:
                await self.rollback()
        finally:
            await self._session.close()
            self._session = None

        if isinstance(exc_val, GATEWAY_ERRORS):
            logger.warning("data_gateway_error", error=_describe(exc_val))
            raise DataGatewayError(_describe(exc_val)) from exc_val
