"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class ClientCreate(BaseModel):
    """Schema for registering a new client."""

    first_name: str = Field(..., min_length=1, max_length=100, examples=["Jessica"])
    last_name: str = Field(..., min_length=1, max_length=100, examples=["Cook"])
    email: EmailStr = Field(..., examples=["jessicacook@gmail.com"])
    phone: str = Field(..., min_length=11, max_length=11, examples=["07314708068"])
    address: str = Field(
        ..., min_length=1, max_length=255, examples=["33 Elm Street, London"]
    )
    notes: str | None = Field(None, examples=["Prefers eco-friendly materials"])


class ClientUpdate(BaseModel):
    """Schema for updating a client. Only supplied fields change."""

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, min_length=11, max_length=11)
    address: str | None = Field(None, min_length=1, max_length=255)
    notes: str | None = None


class ClientResponse(BaseModel):
    """Schema returned to the caller, including the derived project count."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    notes: str | None
    project_ids: list[int]
    total_projects: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
