"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RecordNotFoundError
from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Profile]:
        """Select every profile."""
        stmt = select(ProfileModel).order_by(ProfileModel.username)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def update(self, profile: Profile) -> Profile:
        """Replace the editable fields of a profile."""
        model = await self._session.get(ProfileModel, profile.id)
        if not model:
            raise RecordNotFoundError("profiles", str(profile.id))

        model.username = profile.username
        model.full_name = profile.full_name
        model.age = profile.age
        model.phone = profile.phone
        model.address = profile.address

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a profile."""
        model = await self._session.get(ProfileModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            username=model.username or "",
            full_name=model.full_name or "",
            age=model.age,
            phone=model.phone or "",
            address=model.address or "",
        )
