"""API test fixtures."""

import pytest
from httpx import AsyncClient

from domain.services.console import AdminConsole
from infrastructure.database.models import ProductModel, ProfileModel


@pytest.fixture
async def seeded_client(
    profile: ProfileModel,
    product: ProductModel,
    signed_in_console: AdminConsole,
    authenticated_client: AsyncClient,
) -> AsyncClient:
    """Signed-in client whose snapshots already hold one profile and one product."""
    await signed_in_console.store.refresh_all()
    return authenticated_client
