"""Derived views over the orders snapshot."""

from collections.abc import Iterable
from uuid import UUID

from domain.entities.order import Order


def derive_orders_for_user(orders: Iterable[Order], user_id: UUID | None) -> list[Order]:
    """Orders owned by ``user_id``, in snapshot order.

    An empty selection yields an empty list; callers should not render
    the per-user view in that case.
    """
    if user_id is None:
        return []
    return [order for order in orders if order.user_id == user_id]
