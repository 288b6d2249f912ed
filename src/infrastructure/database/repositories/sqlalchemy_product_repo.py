"""SQLAlchemy implementation of Product repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RecordNotFoundError
from domain.entities.product import Product
from infrastructure.database.models import ProductModel


class SQLAlchemyProductRepository:
    """SQLAlchemy implementation of IProductRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Product]:
        """Select every product."""
        stmt = select(ProductModel).order_by(ProductModel.name)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, product: Product) -> Product:
        """Insert a product."""
        model = self._to_model(product)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, product: Product) -> Product:
        """Replace the editable fields of a product. A None image_path keeps the stored one."""
        model = await self._session.get(ProductModel, product.id)
        if not model:
            raise RecordNotFoundError("products", str(product.id))

        model.name = product.name
        model.description = product.description
        model.price = product.price
        model.stock_quantity = product.stock_quantity
        if product.image_path is not None:
            model.image_path = product.image_path
        model.color = product.color

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a product."""
        model = await self._session.get(ProductModel, id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    @staticmethod
    def _to_entity(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            description=model.description or "",
            price=model.price,
            stock_quantity=model.stock_quantity,
            image_path=model.image_path,
            color=model.color,
        )

    @staticmethod
    def _to_model(entity: Product) -> ProductModel:
        return ProductModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            price=entity.price,
            stock_quantity=entity.stock_quantity,
            image_path=entity.image_path,
            color=entity.color,
        )
