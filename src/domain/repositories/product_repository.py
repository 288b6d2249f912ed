"""Product repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.product import Product


class IProductRepository(Protocol):
    """Repository interface for the products collection."""

    async def list_all(self) -> list[Product]:
        """Select every product."""
        ...

    async def create(self, product: Product) -> Product:
        """Insert a product."""
        ...

    async def update(self, product: Product) -> Product:
        """Replace the editable fields of a product.

        A None image_path keeps the stored path; edits never remove an image.
        """
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a product and return success status."""
        ...
