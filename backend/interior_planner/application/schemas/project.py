"""Pydantic DTOs for the Project feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from interior_planner.domain.entities import ProjectStatus


def _parse_status(value: object) -> object:
    if isinstance(value, str):
        return ProjectStatus.from_name(value) or value
    return value


class ProjectCreate(BaseModel):
    """Schema for creating a project under an existing client."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Kitchen Remodel"])
    status: ProjectStatus = ProjectStatus.PLANNING
    budget: int | None = Field(None, ge=0, examples=[5000])
    start_date: date | None = Field(None, examples=["2024-01-01"])
    due_date: date | None = Field(None, examples=["2024-03-01"])
    description: str | None = None
    meeting_url: str | None = Field(None, max_length=500)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: object) -> object:
        return _parse_status(value)


class ProjectUpdate(BaseModel):
    """Schema for replacing a project's editable fields.

    Omitted optional fields are cleared, except ``description`` and
    ``client_id`` which are kept when absent.
    """

    name: str = Field(..., min_length=1, max_length=200)
    status: ProjectStatus
    budget: int | None = Field(None, ge=0)
    start_date: date | None = None
    due_date: date | None = None
    meeting_url: str | None = Field(None, max_length=500)
    description: str | None = None
    client_id: int | None = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: object) -> object:
        return _parse_status(value)


class ProjectResponse(BaseModel):
    """Schema returned to the caller."""

    id: int
    client_id: int
    name: str
    status: ProjectStatus
    budget: int | None
    start_date: date | None
    due_date: date | None
    description: str | None
    meeting_url: str | None
    completed_at: datetime | None
    room_id: int | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectDeadlineResponse(BaseModel):
    """Due-date projection row."""

    due_date: date | None
    start_date: date | None
    name: str
    status: ProjectStatus
    client_id: int
    room_id: int | None

    model_config = {"from_attributes": True}
