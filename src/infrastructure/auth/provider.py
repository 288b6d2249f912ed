"""Session authority protocol."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol
from uuid import UUID


@dataclass(frozen=True)
class SessionUser:
    """The signed-in operator as reported by the identity provider."""

    id: UUID
    email: str


@dataclass(frozen=True)
class Session:
    """An authenticated session with the identity provider."""

    access_token: str
    user: SessionUser
    refresh_token: Optional[str] = None
    expires_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or datetime.utcnow()) >= self.expires_at


SessionListener = Callable[[Optional[Session]], Awaitable[None]]


class ISessionAuthority(Protocol):
    """Protocol for the identity provider seen by the console."""

    async def get_session(self) -> Optional[Session]:
        """Return the current session, or None when signed out or expired."""
        ...

    async def sign_in(self, email: str, password: str) -> Session:
        """
        Sign in with email and password.

        Raises:
            SessionError: The provider rejected the credentials
        """
        ...

    async def sign_up(self, email: str, password: str) -> Optional[Session]:
        """
        Register a new account.

        Returns:
            The new session, or None when the provider requires
            out-of-band (email) confirmation first.

        Raises:
            SessionError: The provider rejected the registration
        """
        ...

    async def sign_out(self) -> None:
        """End the current session."""
        ...

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a session-change listener.

        Returns:
            A callable that removes the listener
        """
        ...
