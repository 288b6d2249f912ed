"""Dependency injection factories for API v1 (defined in api.dependencies.factories)."""

from api.dependencies.factories import (
    get_blob_storage,
    get_console,
    get_http_client,
    get_session_authority,
    get_uow_factory,
)

__all__ = [
    "get_blob_storage",
    "get_console",
    "get_http_client",
    "get_session_authority",
    "get_uow_factory",
]
