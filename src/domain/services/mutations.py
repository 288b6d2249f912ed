"""Shared write path for the console's mutation handlers."""

from collections.abc import Awaitable, Callable
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import AppException
from domain.entities.console_state import ConsoleState
from domain.entities.outcomes import MutationResult
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.view_state import Collection, ViewStateStore

logger = structlog.get_logger()

WriteOperation = Callable[[IUnitOfWork], Awaitable[Any]]


class MutationHandler:
    """Base class: one remote write, then a refresh of the owning collection.

    A failed write leaves the snapshots and the open form untouched and
    comes back as a failed ``MutationResult``; nothing is retried.
    """

    collection: Collection

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        store: ViewStateStore,
        state: ConsoleState,
    ) -> None:
        self._uow_factory = uow_factory
        self._store = store
        self._state = state

    async def _write(
        self, action: str, record_id: UUID | None, operation: WriteOperation
    ) -> MutationResult | None:
        """Run ``operation`` in its own unit of work.

        Returns a failed result on error, None on success.
        """
        try:
            async with self._uow_factory() as uow:
                await operation(uow)
                await uow.commit()
        except AppException as e:
            logger.error(
                f"{action}_failed",
                collection=self.collection.value,
                record_id=str(record_id) if record_id else None,
                error=e.message,
            )
            return MutationResult(
                ok=False,
                error=e.message,
                error_code=e.error_code.value,
                record_id=record_id,
            )
        logger.info(
            f"{action}_succeeded",
            collection=self.collection.value,
            record_id=str(record_id) if record_id else None,
        )
        return None

    async def _refresh(self) -> bool:
        return await self._store.refresh(self.collection)

    @staticmethod
    def _invalid(message: str, record_id: UUID | None = None) -> MutationResult:
        return MutationResult(
            ok=False,
            error=message,
            error_code="VALIDATION_ERROR",
            record_id=record_id,
        )
