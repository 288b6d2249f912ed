"""Fixtures seeding the test database with storefront rows."""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.models import ProductModel, ProfileModel


@pytest.fixture
async def profile(session_factory: async_sessionmaker[AsyncSession]) -> ProfileModel:
    """A stored customer profile."""
    async with session_factory() as session:
        model = ProfileModel(
            username="jdoe",
            full_name="Jane Doe",
            age=34,
            phone="555-0100",
            address="123 Main",
        )
        session.add(model)
        await session.commit()
        return model


@pytest.fixture
async def product(session_factory: async_sessionmaker[AsyncSession]) -> ProductModel:
    """A stored catalog product."""
    async with session_factory() as session:
        model = ProductModel(
            name="Canvas Tote",
            description="Natural cotton",
            price=Decimal("125.00"),
            stock_quantity=10,
            image_path="tote.png",
            color="Natural",
        )
        session.add(model)
        await session.commit()
        return model
