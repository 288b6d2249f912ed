"""Pydantic schemas for Profile API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdate(BaseModel):
    """Full replacement of a profile's editable fields."""

    username: str = Field("", max_length=100)
    full_name: str = Field("", max_length=200)
    age: int | None = Field(None, ge=0, le=150)
    phone: str = Field("", max_length=50)
    address: str = ""


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    full_name: str
    age: int | None = None
    phone: str
    address: str


class ProfileListResponse(BaseModel):
    """Schema for the profiles snapshot."""

    data: list[ProfileResponse]
