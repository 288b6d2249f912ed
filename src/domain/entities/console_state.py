"""Operator-facing console state: navigation, auth form and edit forms."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum
from uuid import UUID

from domain.entities.order import Order, OrderStatus
from domain.entities.product import Product
from domain.entities.profile import Profile


class ConsoleTab(StrEnum):
    """Top-level console views."""

    PROFILES = "profiles"
    PRODUCTS = "products"
    ORDERS = "orders"


@dataclass(frozen=True, slots=True)
class ImageUpload:
    """A file chosen by the operator, not yet uploaded."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def extension(self) -> str:
        # Text after the last dot, or the whole name when there is none
        return self.filename.rsplit(".", 1)[-1]


@dataclass
class OrderDraft:
    """New-order form: the parent order plus its single line item."""

    user_id: UUID | None = None
    total_amount: Decimal = Decimal("0")
    shipping_address: str = ""
    payment_method: str = "COD"
    product_id: UUID | None = None
    quantity: int = 1
    price_at_purchase: Decimal = Decimal("0")
    product_size: str = ""
    product_color: str = ""


@dataclass
class OrderEdit:
    """Edit form for an existing order's editable fields."""

    id: UUID
    status: OrderStatus
    total_amount: Decimal
    shipping_address: str
    payment_method: str

    @classmethod
    def from_order(cls, order: Order) -> "OrderEdit":
        return cls(
            id=order.id,
            status=order.status,
            total_amount=order.total_amount,
            shipping_address=order.shipping_address,
            payment_method=order.payment_method,
        )


@dataclass
class ProfileEdit:
    """Edit form for a profile."""

    id: UUID
    username: str = ""
    full_name: str = ""
    age: int | None = None
    phone: str = ""
    address: str = ""

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileEdit":
        return cls(
            id=profile.id,
            username=profile.username,
            full_name=profile.full_name,
            age=profile.age,
            phone=profile.phone,
            address=profile.address,
        )


@dataclass
class ProductDraft:
    """New-product form."""

    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    stock_quantity: int = 1
    color: str = ""
    image: ImageUpload | None = None


@dataclass
class ProductEdit:
    """Edit form for a product.

    ``image_path`` is the stored path; ``image`` is set only when the
    operator picked a new file.
    """

    id: UUID
    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    stock_quantity: int = 0
    color: str | None = None
    image_path: str | None = None
    image: ImageUpload | None = None

    @classmethod
    def from_product(cls, product: Product) -> "ProductEdit":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock_quantity=product.stock_quantity,
            color=product.color,
            image_path=product.image_path,
        )


@dataclass
class ConsoleState:
    """Everything the operator sees besides the snapshots themselves."""

    loading: bool = True
    active_tab: ConsoleTab = ConsoleTab.PROFILES
    selected_user_id: UUID | None = None

    # Auth form
    is_signing_up: bool = False
    auth_message: str = ""

    # Forms
    order_draft: OrderDraft = field(default_factory=OrderDraft)
    order_edit: OrderEdit | None = None
    profile_edit: ProfileEdit | None = None
    product_draft: ProductDraft = field(default_factory=ProductDraft)
    product_edit: ProductEdit | None = None
