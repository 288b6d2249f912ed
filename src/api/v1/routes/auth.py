"""Session API routes (sign-in, sign-up, sign-out)."""

from fastapi import APIRouter, Request, status

from api.dependencies.auth import Console
from api.v1.schemas.auth import Credentials, SessionResponse
from core.exceptions import ErrorCode, SessionError
from core.rate_limit import limiter
from domain.services.console import AdminConsole

router = APIRouter(prefix="/auth", tags=["auth"])


def _session_response(console: AdminConsole) -> SessionResponse:
    session = console.session.session
    return SessionResponse(
        authenticated=session is not None,
        user_id=session.user.id if session else None,
        email=session.user.email if session else None,
        access_token=session.access_token if session else None,
        expires_at=session.expires_at if session else None,
        is_signing_up=console.state.is_signing_up,
        auth_message=console.state.auth_message,
    )


@router.get(
    "/session",
    response_model=SessionResponse,
    summary="Current session",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_session(request: Request, console: Console) -> SessionResponse:
    """Report whether an operator is signed in, plus the auth form state."""
    return _session_response(console)


@router.post(
    "/sign-in",
    response_model=SessionResponse,
    summary="Sign in",
    responses={
        200: {"description": "Signed in; all collections refreshed"},
        400: {"description": "Credentials rejected by the identity provider"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def sign_in(
    request: Request, body: Credentials, console: Console
) -> SessionResponse:
    """Sign in with email and password. Success loads every snapshot."""
    if not await console.session.sign_in(body.email, body.password):
        raise SessionError(console.state.auth_message, ErrorCode.SIGN_IN_FAILED)
    return _session_response(console)


@router.post(
    "/sign-up",
    response_model=SessionResponse,
    summary="Sign up",
    responses={
        200: {"description": "Account created; confirmation may be pending"},
        400: {"description": "Registration rejected by the identity provider"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def sign_up(
    request: Request, body: Credentials, console: Console
) -> SessionResponse:
    """Register an operator account.

    When the provider requires email confirmation no session is granted;
    the response carries the confirmation message and the sign-in form.
    """
    if not await console.session.sign_up(body.email, body.password):
        raise SessionError(console.state.auth_message, ErrorCode.SIGN_UP_FAILED)
    return _session_response(console)


@router.post(
    "/sign-out",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Sign out",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def sign_out(request: Request, console: Console) -> None:
    """End the session and clear every snapshot."""
    await console.session.sign_out()
    return None


@router.post(
    "/toggle-mode",
    response_model=SessionResponse,
    summary="Switch between sign-in and sign-up forms",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def toggle_mode(request: Request, console: Console) -> SessionResponse:
    console.session.toggle_auth_mode()
    return _session_response(console)
