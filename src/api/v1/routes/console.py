"""Console state and manual refresh routes."""

from fastapi import APIRouter, Request

from api.dependencies.auth import ActiveSession, Console
from api.v1.schemas.console import (
    ConsoleStateResponse,
    OrderDraftResponse,
    OrderEditResponse,
    ProductEditResponse,
    ProfileEditResponse,
    RefreshResponse,
    SnapshotStatus,
    TabChange,
)
from core.rate_limit import limiter
from domain.services.console import AdminConsole
from domain.services.view_state import Collection

router = APIRouter(prefix="/console", tags=["console"])


def _state_response(console: AdminConsole) -> ConsoleStateResponse:
    state = console.state
    store = console.store
    product_edit = None
    if state.product_edit:
        edit = state.product_edit
        product_edit = ProductEditResponse(
            id=edit.id,
            name=edit.name,
            description=edit.description,
            price=edit.price,
            stock_quantity=edit.stock_quantity,
            color=edit.color,
            image_path=edit.image_path,
            pending_image=edit.image.filename if edit.image else None,
        )

    return ConsoleStateResponse(
        loading=state.loading,
        authenticated=console.session.session is not None,
        active_tab=state.active_tab,
        selected_user_id=state.selected_user_id,
        is_signing_up=state.is_signing_up,
        auth_message=state.auth_message,
        snapshots={
            c.value: SnapshotStatus(
                size=len(store.snapshot(c)),
                version=store.version(c),
                last_error=store.last_error(c),
            )
            for c in Collection
        },
        order_draft=OrderDraftResponse.model_validate(state.order_draft),
        order_edit=(
            OrderEditResponse.model_validate(state.order_edit) if state.order_edit else None
        ),
        profile_edit=(
            ProfileEditResponse.model_validate(state.profile_edit)
            if state.profile_edit
            else None
        ),
        product_edit=product_edit,
    )


@router.get(
    "",
    response_model=ConsoleStateResponse,
    summary="Console state",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_console_state(
    request: Request, session: ActiveSession, console: Console
) -> ConsoleStateResponse:
    """Navigation, auth form, open forms and snapshot bookkeeping."""
    return _state_response(console)


@router.post(
    "/tab",
    response_model=ConsoleStateResponse,
    summary="Switch tab",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def change_tab(
    request: Request, body: TabChange, session: ActiveSession, console: Console
) -> ConsoleStateResponse:
    """Switch the active tab. Clears the per-user order selection."""
    console.show_tab(body.tab)
    return _state_response(console)


@router.post(
    "/refresh/{collection}",
    response_model=RefreshResponse,
    summary="Refetch one collection",
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def refresh_collection(
    request: Request, collection: str, session: ActiveSession, console: Console
) -> RefreshResponse:
    """Replace one snapshot with a full refetch; a failed fetch keeps the old one."""
    target = Collection.parse(collection)
    refreshed = await console.store.refresh(target)
    return RefreshResponse(
        collection=target.value,
        refreshed=refreshed,
        size=len(console.store.snapshot(target)),
        last_error=console.store.last_error(target),
    )
