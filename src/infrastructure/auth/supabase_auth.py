"""Supabase (GoTrue) session authority over httpx.

GoTrue token payload structure:
    {
        "sub": "user-uuid",
        "email": "user@example.com",
        "role": "authenticated",
        "aud": "authenticated",
        "exp": 1234567890
    }
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

import httpx
from jose import JWTError, jwt

from core.config import settings
from core.exceptions import AuthProviderError, ErrorCode, SessionError
from infrastructure.auth.provider import Session, SessionListener, SessionUser

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of a GoTrue error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if not isinstance(body, dict):
        return str(body)
    return str(
        body.get("msg")
        or body.get("error_description")
        or body.get("message")
        or body.get("error")
        or response.reason_phrase
    )


class SupabaseSessionAuthority:
    """Session authority backed by the Supabase auth REST API.

    Holds the current session in memory and notifies subscribers on
    every change (sign-in, sign-out, expiry).
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        auth_url: str = settings.supabase_auth_url,
        anon_key: str = settings.supabase_anon_key,
        jwt_secret: str = settings.supabase_jwt_secret,
        jwt_algorithm: str = settings.jwt_algorithm,
    ) -> None:
        self._client = client
        self._auth_url = auth_url.rstrip("/")
        self._anon_key = anon_key
        self._jwt_secret = jwt_secret
        self._jwt_algorithm = jwt_algorithm
        self._session: Optional[Session] = None
        self._listeners: list[SessionListener] = []

    @property
    def current(self) -> Optional[Session]:
        """The in-memory session without expiry checks or I/O."""
        return self._session

    async def get_session(self) -> Optional[Session]:
        if self._session and self._session.is_expired():
            logger.info("Session for %s expired", self._session.user.email)
            await self._set_session(None)
        return self._session

    async def sign_in(self, email: str, password: str) -> Session:
        response = await self._post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        if response.is_error:
            raise SessionError(_error_message(response), ErrorCode.SIGN_IN_FAILED)

        session = self._session_from_payload(response.json())
        await self._set_session(session)
        return session

    async def sign_up(self, email: str, password: str) -> Optional[Session]:
        response = await self._post(
            "/signup",
            json={"email": email, "password": password},
        )
        if response.is_error:
            raise SessionError(_error_message(response), ErrorCode.SIGN_UP_FAILED)

        payload = response.json()
        if not payload.get("access_token"):
            # Email confirmation pending: the provider returned only the user
            return None

        session = self._session_from_payload(payload)
        await self._set_session(session)
        return session

    async def sign_out(self) -> None:
        session = self._session
        if session:
            try:
                response = await self._post(
                    "/logout",
                    headers={"Authorization": f"Bearer {session.access_token}"},
                )
                if response.is_error:
                    logger.warning("Sign-out rejected: %s", _error_message(response))
            except AuthProviderError:
                logger.warning("Sign-out request failed; clearing local session")
        await self._set_session(None)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _set_session(self, session: Optional[Session]) -> None:
        self._session = session
        for listener in list(self._listeners):
            await listener(session)

    async def _post(
        self,
        path: str,
        params: Optional[dict[str, str]] = None,
        json: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        if not self._auth_url:
            raise AuthProviderError("Supabase URL is not configured")

        request_headers = {"apikey": self._anon_key}
        if headers:
            request_headers.update(headers)
        try:
            return await self._client.post(
                f"{self._auth_url}{path}",
                params=params,
                json=json,
                headers=request_headers,
            )
        except httpx.HTTPError as e:
            logger.exception("Auth request to %s failed", path)
            raise AuthProviderError(f"Identity provider unreachable: {e}") from e

    def _session_from_payload(self, payload: dict[str, Any]) -> Session:
        """Build a Session from a GoTrue token response."""
        access_token = payload.get("access_token")
        if not access_token:
            raise AuthProviderError("Identity provider returned no access token")

        claims = self._read_claims(access_token)
        user_data = payload.get("user") or {}
        user_id = user_data.get("id") or claims.get("sub")
        email = user_data.get("email") or claims.get("email") or ""
        if not user_id:
            raise AuthProviderError("Access token carries no subject")

        expires_at = None
        exp = payload.get("expires_at") or claims.get("exp")
        if exp:
            expires_at = datetime.utcfromtimestamp(int(exp))

        return Session(
            access_token=access_token,
            refresh_token=payload.get("refresh_token"),
            user=SessionUser(id=UUID(str(user_id)), email=email),
            expires_at=expires_at,
        )

    def _read_claims(self, token: str) -> dict[str, Any]:
        """Decode the access token, verifying it when a secret is configured."""
        try:
            if self._jwt_secret:
                return jwt.decode(
                    token,
                    self._jwt_secret,
                    algorithms=[self._jwt_algorithm],
                    options={"verify_aud": False},
                )
            return jwt.get_unverified_claims(token)
        except JWTError as e:
            raise AuthProviderError(f"Unreadable access token: {e}") from e
