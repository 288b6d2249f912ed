"""Product domain entity."""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass
class Product:
    """Domain entity for a catalog product."""

    name: str
    id: UUID = field(default_factory=uuid4)
    description: str = ""
    price: Decimal = Decimal("0")
    stock_quantity: int = 0
    image_path: str | None = None
    color: str | None = None

    def __post_init__(self) -> None:
        """Normalize price and reject negative amounts."""
        self.price = Decimal(str(self.price))
        if self.price < 0:
            raise ValueError("price must not be negative")
        if self.stock_quantity < 0:
            raise ValueError("stock_quantity must not be negative")
