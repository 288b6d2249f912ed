"""In-memory stand-ins for the external collaborators."""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from core.exceptions import ErrorCode, SessionError, StorageError
from infrastructure.auth.provider import Session, SessionListener, SessionUser

TEST_ACCESS_TOKEN = "test-access-token"


def make_session(
    email: str = "admin@example.com",
    user_id: Optional[UUID] = None,
    access_token: str = TEST_ACCESS_TOKEN,
    expires_in: timedelta = timedelta(hours=1),
) -> Session:
    return Session(
        access_token=access_token,
        user=SessionUser(id=user_id or uuid4(), email=email),
        expires_at=datetime.utcnow() + expires_in,
    )


class FakeSessionAuthority:
    """Session authority that never leaves the process."""

    def __init__(self, session: Optional[Session] = None) -> None:
        self.session = session
        self.sign_in_error: Optional[str] = None
        self.sign_up_error: Optional[str] = None
        self.sign_up_requires_confirmation = True
        self.signed_out = False
        self._listeners: list[SessionListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    async def get_session(self) -> Optional[Session]:
        return self.session

    async def sign_in(self, email: str, password: str) -> Session:
        if self.sign_in_error:
            raise SessionError(self.sign_in_error, ErrorCode.SIGN_IN_FAILED)
        session = make_session(email=email)
        await self._emit(session)
        return session

    async def sign_up(self, email: str, password: str) -> Optional[Session]:
        if self.sign_up_error:
            raise SessionError(self.sign_up_error, ErrorCode.SIGN_UP_FAILED)
        if self.sign_up_requires_confirmation:
            return None
        session = make_session(email=email)
        await self._emit(session)
        return session

    async def sign_out(self) -> None:
        self.signed_out = True
        await self._emit(None)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _emit(self, session: Optional[Session]) -> None:
        self.session = session
        for listener in list(self._listeners):
            await listener(session)


class FakeBlobStorage:
    """Blob storage keeping uploads in a dict."""

    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.fail_with: Optional[str] = None

    async def upload(
        self, bucket: str, name: str, content: bytes, content_type: str
    ) -> str:
        if self.fail_with:
            raise StorageError(self.fail_with, bucket=bucket)
        self.objects[(bucket, name)] = content
        return name

    def public_url(self, bucket: str, path: str) -> str:
        return f"https://storage.test/{bucket}/{path}"
