"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Request, status

from api.dependencies.auth import ActiveSession, Console
from api.v1.results import ensure_succeeded
from api.v1.schemas.common import MutationResponse
from api.v1.schemas.order import OrderResponse, UserOrdersResponse
from api.v1.schemas.profile import ProfileListResponse, ProfileResponse, ProfileUpdate
from core.rate_limit import limiter
from domain.entities.console_state import ProfileEdit

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request, session: ActiveSession, console: Console
) -> ProfileListResponse:
    """The profiles snapshot as of the last successful fetch."""
    return ProfileListResponse(
        data=[ProfileResponse.model_validate(p) for p in console.store.profiles]
    )


@router.put(
    "/{profile_id}",
    response_model=MutationResponse,
    summary="Edit a profile",
    responses={
        200: {"description": "Profile updated; profiles refreshed"},
        404: {"description": "Profile not found"},
        502: {"description": "Update rejected; the edit form is kept"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: UUID,
    body: ProfileUpdate,
    session: ActiveSession,
    console: Console,
) -> MutationResponse:
    """Replace username, full name, age, phone and address."""
    edit = ProfileEdit(
        id=profile_id,
        username=body.username,
        full_name=body.full_name,
        age=body.age,
        phone=body.phone,
        address=body.address,
    )
    console.state.profile_edit = edit

    result = ensure_succeeded(await console.profile_service.save_edit(edit))
    return MutationResponse(record_id=result.record_id, refreshed=result.refreshed)


@router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a profile",
    responses={
        204: {"description": "Profile deleted; profiles refreshed"},
        404: {"description": "Profile not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request, profile_id: UUID, session: ActiveSession, console: Console
) -> None:
    """Delete a profile. Its orders stay visible until the orders are refreshed."""
    ensure_succeeded(await console.profile_service.delete(profile_id))
    return None


@router.get(
    "/{profile_id}/orders",
    response_model=UserOrdersResponse,
    summary="Orders for a profile",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profile_orders(
    request: Request, profile_id: UUID, session: ActiveSession, console: Console
) -> UserOrdersResponse:
    """Select the profile and return its orders in snapshot order."""
    orders = console.view_user_orders(profile_id)
    return UserOrdersResponse(
        user_id=profile_id,
        data=[OrderResponse.model_validate(o) for o in orders],
    )
