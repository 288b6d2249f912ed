"""Result value objects returned by console actions."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of a single create/update/delete action.

    ``refreshed`` is False when the write succeeded but the follow-up
    snapshot refresh did not.
    """

    ok: bool
    error: str | None = None
    error_code: str | None = None
    refreshed: bool = False
    record_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class OrderComposition:
    """Two-phase outcome of submitting an order with its line item."""

    parent_created: bool
    item_created: bool
    order_id: UUID | None = None
    item_id: UUID | None = None
    error: str | None = None
    refreshed: bool = False

    @property
    def ok(self) -> bool:
        return self.parent_created and self.item_created

    @property
    def is_orphan(self) -> bool:
        """Parent order persisted without its item; left for the operator."""
        return self.parent_created and not self.item_created
