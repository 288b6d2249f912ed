"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for the profiles collection."""

    async def list_all(self) -> list[Profile]:
        """Select every profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Replace the editable fields of a profile."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a profile and return success status."""
        ...
