"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.order_repository import IOrderItemRepository, IOrderRepository
from domain.repositories.product_repository import IProductRepository
from domain.repositories.profile_repository import IProfileRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface over the remote data gateway.

    One unit of work is one round of calls against the data service.
    Failures surface as ``DataGatewayError``.
    """

    profiles: IProfileRepository
    products: IProductRepository
    orders: IOrderRepository
    order_items: IOrderItemRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
