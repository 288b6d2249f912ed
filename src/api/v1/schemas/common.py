"""Common Pydantic schemas shared across the API."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class MutationResponse(BaseModel):
    """Result of a successful update/delete."""

    ok: bool = True
    record_id: UUID | None = None
    refreshed: bool
