"""Profile edit/delete handlers."""

from uuid import UUID

from core.exceptions import RecordNotFoundError
from domain.entities.console_state import ProfileEdit
from domain.entities.outcomes import MutationResult
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.mutations import MutationHandler
from domain.services.view_state import Collection


class ProfileService(MutationHandler):
    """Profile mutations. Success refreshes Profiles only."""

    collection = Collection.PROFILES

    async def save_edit(self, edit: ProfileEdit | None = None) -> MutationResult:
        """Submit a profile edit form, the open one by default."""
        edit = edit or self._state.profile_edit
        if edit is None:
            return self._invalid("No profile is being edited")

        profile = Profile(
            id=edit.id,
            username=edit.username,
            full_name=edit.full_name,
            age=edit.age,
            phone=edit.phone,
            address=edit.address,
        )

        async def update(uow: IUnitOfWork) -> None:
            await uow.profiles.update(profile)

        failed = await self._write("profile_update", edit.id, update)
        if failed:
            return failed

        refreshed = await self._refresh()
        if self._state.profile_edit is edit:
            self._state.profile_edit = None
        return MutationResult(ok=True, refreshed=refreshed, record_id=edit.id)

    async def delete(self, profile_id: UUID) -> MutationResult:
        """Delete a profile. The orders snapshot is deliberately not refreshed."""

        async def delete(uow: IUnitOfWork) -> None:
            if not await uow.profiles.delete(profile_id):
                raise RecordNotFoundError("profiles", str(profile_id))

        failed = await self._write("profile_delete", profile_id, delete)
        if failed:
            return failed

        refreshed = await self._refresh()
        return MutationResult(ok=True, refreshed=refreshed, record_id=profile_id)
