"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

import httpx

from core.config import settings
from domain.services.console import AdminConsole
from infrastructure.auth.supabase_auth import SupabaseSessionAuthority
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.storage.supabase_storage import SupabaseBlobStorage


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_http_client() -> httpx.AsyncClient:
    """Shared outbound client for the identity provider and storage."""
    return httpx.AsyncClient(timeout=settings.http_timeout_seconds)


@lru_cache
def get_session_authority() -> SupabaseSessionAuthority:
    """Get Supabase session authority instance."""
    return SupabaseSessionAuthority(get_http_client())


@lru_cache
def get_blob_storage() -> SupabaseBlobStorage:
    """Get Supabase storage client, authenticated as the signed-in operator."""
    authority = get_session_authority()

    def access_token() -> str | None:
        session = authority.current
        return session.access_token if session else None

    return SupabaseBlobStorage(get_http_client(), access_token=access_token)


@lru_cache
def get_console() -> AdminConsole:
    """Get the process-wide console instance."""
    return AdminConsole(
        get_uow_factory(),
        get_session_authority(),
        get_blob_storage(),
        images_bucket=settings.product_images_bucket,
        default_payment_method=settings.default_payment_method,
    )
