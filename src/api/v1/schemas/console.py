"""Pydantic schemas for the console state endpoints."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domain.entities.console_state import ConsoleTab
from domain.entities.order import OrderStatus


class OrderDraftResponse(BaseModel):
    """New-order form contents."""

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID | None = None
    total_amount: Decimal
    shipping_address: str
    payment_method: str
    product_id: UUID | None = None
    quantity: int
    price_at_purchase: Decimal
    product_size: str
    product_color: str


class OrderEditResponse(BaseModel):
    """Open order edit form."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    status: OrderStatus
    total_amount: Decimal
    shipping_address: str
    payment_method: str


class ProfileEditResponse(BaseModel):
    """Open profile edit form."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    full_name: str
    age: int | None = None
    phone: str
    address: str


class ProductEditResponse(BaseModel):
    """Open product edit form (the pending file is reported by name only)."""

    id: UUID
    name: str
    description: str
    price: Decimal
    stock_quantity: int
    color: str | None = None
    image_path: str | None = None
    pending_image: str | None = None


class SnapshotStatus(BaseModel):
    """Per-collection snapshot bookkeeping."""

    size: int
    version: int
    last_error: str | None = None


class ConsoleStateResponse(BaseModel):
    """Everything the front end needs to render the console chrome."""

    loading: bool
    authenticated: bool
    active_tab: ConsoleTab
    selected_user_id: UUID | None = None
    is_signing_up: bool
    auth_message: str
    snapshots: dict[str, SnapshotStatus]
    order_draft: OrderDraftResponse
    order_edit: OrderEditResponse | None = None
    profile_edit: ProfileEditResponse | None = None
    product_edit: ProductEditResponse | None = None


class TabChange(BaseModel):
    """Switch the active console tab."""

    tab: ConsoleTab


class RefreshResponse(BaseModel):
    """Outcome of a manual snapshot refresh."""

    collection: str
    refreshed: bool
    size: int
    last_error: str | None = None
