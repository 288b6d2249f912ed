"""Product API routes."""

from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, File, Form, Request, UploadFile, status

from api.dependencies.auth import ActiveSession, Console
from api.v1.results import ensure_succeeded
from api.v1.schemas.common import MutationResponse
from api.v1.schemas.product import ProductListResponse, ProductResponse
from core.rate_limit import limiter
from domain.entities.console_state import ImageUpload, ProductDraft, ProductEdit
from domain.entities.product import Product
from domain.services.console import AdminConsole

router = APIRouter(prefix="/products", tags=["products"])


def _to_response(console: AdminConsole, product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock_quantity=product.stock_quantity,
        image_path=product.image_path,
        image_url=console.product_service.image_url(product),
        color=product.color,
    )


async def _read_upload(image: UploadFile | None) -> ImageUpload | None:
    # Browsers send an empty part when no file was picked
    if image is None or not image.filename:
        return None
    return ImageUpload(
        filename=image.filename,
        content=await image.read(),
        content_type=image.content_type or "application/octet-stream",
    )


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_products(
    request: Request, session: ActiveSession, console: Console
) -> ProductListResponse:
    """The products snapshot, with image paths resolved to public URLs."""
    return ProductListResponse(
        data=[_to_response(console, p) for p in console.store.products]
    )


@router.post(
    "",
    response_model=MutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    responses={
        201: {"description": "Product created; products refreshed"},
        502: {"description": "Upload or insert failed; the form is kept"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_product(
    request: Request,
    session: ActiveSession,
    console: Console,
    name: str = Form(..., min_length=1, max_length=255),
    description: str = Form(""),
    price: Decimal = Form(Decimal("0"), ge=0),
    stock_quantity: int = Form(1, ge=0),
    color: str = Form(""),
    image: UploadFile | None = File(None),
) -> MutationResponse:
    """Create a product. An attached image is uploaded before the insert."""
    console.state.product_draft = ProductDraft(
        name=name,
        description=description,
        price=price,
        stock_quantity=stock_quantity,
        color=color,
        image=await _read_upload(image),
    )
    result = ensure_succeeded(await console.product_service.create())
    return MutationResponse(record_id=result.record_id, refreshed=result.refreshed)


@router.put(
    "/{product_id}",
    response_model=MutationResponse,
    summary="Edit a product",
    responses={
        200: {"description": "Product updated; products refreshed"},
        404: {"description": "Product not found"},
        502: {"description": "Upload or update failed; the edit form is kept"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_product(
    request: Request,
    product_id: UUID,
    session: ActiveSession,
    console: Console,
    name: str = Form(..., min_length=1, max_length=255),
    description: str = Form(""),
    price: Decimal = Form(..., ge=0),
    stock_quantity: int = Form(..., ge=0),
    color: str | None = Form(None),
    image: UploadFile | None = File(None),
) -> MutationResponse:
    """Replace a product's fields. Without a new file the stored image is kept."""
    edit = ProductEdit(
        id=product_id,
        name=name,
        description=description,
        price=price,
        stock_quantity=stock_quantity,
        color=color,
        image=await _read_upload(image),
    )
    console.state.product_edit = edit

    result = ensure_succeeded(await console.product_service.save_edit(edit))
    return MutationResponse(record_id=result.record_id, refreshed=result.refreshed)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    responses={
        204: {"description": "Product deleted; products refreshed"},
        404: {"description": "Product not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_product(
    request: Request, product_id: UUID, session: ActiveSession, console: Console
) -> None:
    ensure_succeeded(await console.product_service.delete(product_id))
    return None
