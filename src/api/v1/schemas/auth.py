"""Pydantic schemas for the session endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Email/password pair for sign-in and sign-up."""

    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    """Current authentication state of the console."""

    model_config = {
        "json_schema_extra": {
            "example": {
                "authenticated": True,
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "email": "admin@example.com",
                "access_token": "eyJhbGciOi...",
                "expires_at": "2026-01-28T11:00:00",
                "is_signing_up": False,
                "auth_message": "",
            }
        }
    }

    authenticated: bool
    user_id: UUID | None = None
    email: str | None = None
    access_token: str | None = None
    expires_at: datetime | None = None
    is_signing_up: bool = False
    auth_message: str = ""
