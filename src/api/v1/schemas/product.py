"""Pydantic schemas for Product API."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ProductResponse(BaseModel):
    """Schema for Product response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "name": "Linen shirt",
                "description": "Short sleeve",
                "price": "125.00",
                "stock_quantity": 12,
                "image_path": "0b8f0c6d2f0e4c1a9a7f.png",
                "image_url": "https://xyz.supabase.co/storage/v1/object/public/product-images/0b8f0c6d2f0e4c1a9a7f.png",
                "color": "white",
            }
        },
    )

    id: UUID
    name: str
    description: str
    price: Decimal
    stock_quantity: int
    image_path: str | None = None
    image_url: str | None = None
    color: str | None = None


class ProductListResponse(BaseModel):
    """Schema for the products snapshot."""

    data: list[ProductResponse]
