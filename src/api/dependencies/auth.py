"""Authentication dependencies for FastAPI."""

import secrets
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies.factories import get_console
from core.exceptions import AuthenticationError, ErrorCode
from domain.services.console import AdminConsole
from infrastructure.auth.provider import Session

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)


async def get_active_session(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    console: AdminConsole = Depends(get_console),
) -> Session:
    """
    Dependency requiring a signed-in console and the session's bearer token.

    Raises:
        AuthenticationError: If nobody is signed in, no token was sent,
            or the token is not the active session's
    """
    session = console.session.session
    if session is None:
        raise AuthenticationError(
            message="Sign in to use the console",
            error_code=ErrorCode.SESSION_REQUIRED,
        )

    if not credentials:
        raise AuthenticationError(
            message="Authorization header required",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    if session.is_expired() or not secrets.compare_digest(
        credentials.credentials, session.access_token
    ):
        raise AuthenticationError(
            message="Invalid or expired token",
            error_code=ErrorCode.INVALID_TOKEN,
        )

    return session


# Type aliases for convenience in route handlers
ActiveSession = Annotated[Session, Depends(get_active_session)]
Console = Annotated[AdminConsole, Depends(get_console)]
