"""Order API routes."""

from uuid import UUID

from fastapi import APIRouter, Request, status

from api.dependencies.auth import ActiveSession, Console
from api.v1.results import ensure_composed, ensure_succeeded
from api.v1.schemas.common import MutationResponse
from api.v1.schemas.order import (
    OrderCompositionResponse,
    OrderCreate,
    OrderListResponse,
    OrderResponse,
    OrderUpdate,
)
from core.rate_limit import limiter
from domain.entities.console_state import OrderDraft, OrderEdit

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get(
    "",
    response_model=OrderListResponse,
    summary="List orders",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_orders(
    request: Request, session: ActiveSession, console: Console
) -> OrderListResponse:
    """The orders snapshot with nested items."""
    return OrderListResponse(
        data=[OrderResponse.model_validate(o) for o in console.store.orders]
    )


@router.post(
    "",
    response_model=OrderCompositionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an order with one item",
    responses={
        201: {"description": "Order and item created; orders refreshed"},
        502: {
            "description": (
                "ORDER_NOT_CREATED: nothing was written. "
                "ORDER_ITEM_NOT_CREATED: the order exists without items."
            )
        },
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_order(
    request: Request, body: OrderCreate, session: ActiveSession, console: Console
) -> OrderCompositionResponse:
    """Insert the order, then its line item. The two writes are not atomic."""
    console.state.order_draft = OrderDraft(**body.model_dump())
    composition = ensure_composed(await console.composer.submit())
    created = next((o for o in console.store.orders if o.id == composition.order_id), None)
    return OrderCompositionResponse(
        parent_created=composition.parent_created,
        item_created=composition.item_created,
        order_id=composition.order_id,
        item_id=composition.item_id,
        refreshed=composition.refreshed,
        data=OrderResponse.model_validate(created) if created else None,
    )


@router.put(
    "/{order_id}",
    response_model=MutationResponse,
    summary="Edit an order",
    responses={
        200: {"description": "Order updated; orders refreshed"},
        404: {"description": "Order not found"},
        502: {"description": "Update rejected; the edit form is kept"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_order(
    request: Request,
    order_id: UUID,
    body: OrderUpdate,
    session: ActiveSession,
    console: Console,
) -> MutationResponse:
    """Replace status, total, shipping address and payment method."""
    # The store decides whether the order exists, not the snapshot
    edit = OrderEdit(
        id=order_id,
        status=body.status,
        total_amount=body.total_amount,
        shipping_address=body.shipping_address,
        payment_method=body.payment_method,
    )
    console.state.order_edit = edit

    result = ensure_succeeded(await console.order_service.save_edit(edit))
    return MutationResponse(record_id=result.record_id, refreshed=result.refreshed)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an order",
    responses={
        204: {"description": "Order and its items deleted; orders refreshed"},
        404: {"description": "Order not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_order(
    request: Request, order_id: UUID, session: ActiveSession, console: Console
) -> None:
    ensure_succeeded(await console.order_service.delete(order_id))
    return None
