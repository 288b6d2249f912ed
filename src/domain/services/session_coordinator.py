"""Session changes drive the snapshot store."""

from collections.abc import Callable
from typing import Optional

import structlog

from core.exceptions import AppException
from domain.entities.console_state import ConsoleState
from domain.services.view_state import ViewStateStore
from infrastructure.auth.provider import ISessionAuthority, Session

logger = structlog.get_logger()

SIGN_UP_CONFIRMATION_MESSAGE = (
    "Sign up successful! Please check your email to confirm your account."
)


class SessionCoordinator:
    """Single seam between the session authority and the store.

    A valid session refreshes all three collections once; losing the
    session clears them. Sign-in and sign-up failures only set the auth
    message.
    """

    def __init__(
        self,
        authority: ISessionAuthority,
        store: ViewStateStore,
        state: ConsoleState,
    ) -> None:
        self._authority = authority
        self._store = store
        self._state = state
        self._session: Optional[Session] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    async def start(self) -> None:
        """Load the persisted session, then follow session changes."""
        session = await self._authority.get_session()
        self._state.loading = False
        await self.handle_session_change(session)
        self._unsubscribe = self._authority.subscribe(self.handle_session_change)

    def stop(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    async def handle_session_change(self, session: Optional[Session]) -> None:
        self._session = session
        if session is not None:
            logger.info("session_started", user_id=str(session.user.id))
            outcomes = await self._store.refresh_all()
            failed = [c.value for c, ok in outcomes.items() if not ok]
            if failed:
                logger.warning("initial_refresh_incomplete", collections=failed)
        else:
            logger.info("session_ended")
            self._store.clear()
            self._state.selected_user_id = None

    async def sign_in(self, email: str, password: str) -> bool:
        self._state.auth_message = ""
        try:
            await self._authority.sign_in(email, password)
        except AppException as e:
            logger.info("sign_in_failed", error=e.message)
            self._state.auth_message = f"Sign in failed: {e.message}"
            return False
        return True

    async def sign_up(self, email: str, password: str) -> bool:
        self._state.auth_message = ""
        try:
            session = await self._authority.sign_up(email, password)
        except AppException as e:
            logger.info("sign_up_failed", error=e.message)
            self._state.auth_message = f"Sign up failed: {e.message}"
            return False

        logger.info("sign_up_succeeded", session_granted=session is not None)
        self._state.auth_message = SIGN_UP_CONFIRMATION_MESSAGE
        self._state.is_signing_up = False
        return True

    async def sign_out(self) -> None:
        await self._authority.sign_out()
        # The authority normally notifies us; make sure the store is cleared
        if self._session is not None:
            await self.handle_session_change(None)

    def toggle_auth_mode(self) -> None:
        self._state.is_signing_up = not self._state.is_signing_up
        self._state.auth_message = ""
