"""Product create/edit/delete handlers and image handling."""

from collections.abc import Callable
from dataclasses import replace
from uuid import UUID, uuid4

import structlog

from core.exceptions import RecordNotFoundError, StorageError
from domain.entities.console_state import (
    ConsoleState,
    ImageUpload,
    ProductDraft,
    ProductEdit,
)
from domain.entities.outcomes import MutationResult
from domain.entities.product import Product
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.mutations import MutationHandler
from domain.services.view_state import Collection, ViewStateStore
from infrastructure.storage.provider import IBlobStorage

logger = structlog.get_logger()


class ProductService(MutationHandler):
    """Product mutations. Images are uploaded before the record write."""

    collection = Collection.PRODUCTS

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        store: ViewStateStore,
        state: ConsoleState,
        storage: IBlobStorage,
        bucket: str = "product-images",
    ) -> None:
        super().__init__(uow_factory, store, state)
        self._storage = storage
        self._bucket = bucket

    async def create(self) -> MutationResult:
        """Submit the new-product form."""
        draft = self._state.product_draft
        try:
            product = Product(
                name=draft.name,
                description=draft.description,
                price=draft.price,
                stock_quantity=draft.stock_quantity,
                color=draft.color or None,
            )
        except ValueError as e:
            return self._invalid(str(e))

        if draft.image is not None:
            try:
                product = replace(product, image_path=await self._upload(draft.image))
            except StorageError as e:
                return self._upload_failed(e, None)

        async def insert(uow: IUnitOfWork) -> None:
            await uow.products.create(product)

        failed = await self._write("product_create", product.id, insert)
        if failed:
            return failed

        refreshed = await self._refresh()
        self._state.product_draft = ProductDraft()
        return MutationResult(ok=True, refreshed=refreshed, record_id=product.id)

    async def save_edit(self, edit: ProductEdit | None = None) -> MutationResult:
        """Submit a product edit form, the open one by default.

        The stored image path is kept unless a new file was chosen.
        """
        edit = edit or self._state.product_edit
        if edit is None:
            return self._invalid("No product is being edited")

        try:
            product = Product(
                id=edit.id,
                name=edit.name,
                description=edit.description,
                price=edit.price,
                stock_quantity=edit.stock_quantity,
                image_path=edit.image_path,
                color=edit.color,
            )
        except ValueError as e:
            return self._invalid(str(e), edit.id)

        if edit.image is not None:
            try:
                product = replace(product, image_path=await self._upload(edit.image))
            except StorageError as e:
                return self._upload_failed(e, edit.id)

        async def update(uow: IUnitOfWork) -> None:
            await uow.products.update(product)

        failed = await self._write("product_update", edit.id, update)
        if failed:
            return failed

        refreshed = await self._refresh()
        if self._state.product_edit is edit:
            self._state.product_edit = None
        return MutationResult(ok=True, refreshed=refreshed, record_id=edit.id)

    async def delete(self, product_id: UUID) -> MutationResult:
        async def delete(uow: IUnitOfWork) -> None:
            if not await uow.products.delete(product_id):
                raise RecordNotFoundError("products", str(product_id))

        failed = await self._write("product_delete", product_id, delete)
        if failed:
            return failed

        refreshed = await self._refresh()
        return MutationResult(ok=True, refreshed=refreshed, record_id=product_id)

    def image_url(self, product: Product) -> str | None:
        """Public URL of the product image, if it has one."""
        if not product.image_path:
            return None
        return self._storage.public_url(self._bucket, product.image_path)

    async def _upload(self, image: ImageUpload) -> str:
        name = f"{uuid4().hex}.{image.extension}"
        return await self._storage.upload(
            self._bucket, name, image.content, image.content_type
        )

    def _upload_failed(self, error: StorageError, record_id: UUID | None) -> MutationResult:
        logger.error("product_image_upload_failed", bucket=self._bucket, error=error.message)
        return MutationResult(
            ok=False,
            error=error.message,
            error_code=error.error_code.value,
            record_id=record_id,
        )
