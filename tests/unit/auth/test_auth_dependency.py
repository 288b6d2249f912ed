"""Unit tests for authentication dependencies."""

from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies.auth import get_active_session
from core.exceptions import AuthenticationError, ErrorCode
from domain.services.console import AdminConsole
from tests.fakes import (
    TEST_ACCESS_TOKEN,
    FakeBlobStorage,
    FakeSessionAuthority,
    make_session,
)
from tests.unit.conftest import FakeUnitOfWork


async def _console(authority: FakeSessionAuthority) -> AdminConsole:
    uow = FakeUnitOfWork()
    console = AdminConsole(lambda: uow, authority, FakeBlobStorage())
    await console.start()
    return console


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetActiveSession:
    @pytest.mark.asyncio
    async def test_returns_session_for_matching_token(self):
        session = make_session()
        console = await _console(FakeSessionAuthority(session))

        result = await get_active_session(_bearer(TEST_ACCESS_TOKEN), console)

        assert result is session

    @pytest.mark.asyncio
    async def test_raises_when_signed_out(self):
        console = await _console(FakeSessionAuthority())

        with pytest.raises(AuthenticationError) as exc_info:
            await get_active_session(_bearer(TEST_ACCESS_TOKEN), console)

        assert exc_info.value.error_code == ErrorCode.SESSION_REQUIRED

    @pytest.mark.asyncio
    async def test_raises_when_no_credentials(self):
        console = await _console(FakeSessionAuthority(make_session()))

        with pytest.raises(AuthenticationError) as exc_info:
            await get_active_session(None, console)

        assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_raises_for_foreign_token(self):
        console = await _console(FakeSessionAuthority(make_session()))

        with pytest.raises(AuthenticationError) as exc_info:
            await get_active_session(_bearer("someone-elses-token"), console)

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_raises_when_session_expired(self):
        expired = make_session(expires_in=timedelta(seconds=-5))
        console = AdminConsole(
            lambda: FakeUnitOfWork(), FakeSessionAuthority(), FakeBlobStorage()
        )
        await console.session.handle_session_change(expired)

        with pytest.raises(AuthenticationError) as exc_info:
            await get_active_session(_bearer(TEST_ACCESS_TOKEN), console)

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN
