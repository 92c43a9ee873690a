"""Pydantic DTOs for the Room feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from interior_planner.domain.entities import RoomType


class RoomCreate(BaseModel):
    """Schema for adding a room to a project."""

    type: RoomType = Field(..., examples=["KITCHEN"])
    length: float = Field(..., gt=0, examples=[4.0])
    width: float = Field(..., gt=0, examples=[3.0])
    height: float = Field(..., gt=0, examples=[2.5])
    unit: str = Field("m", min_length=1, max_length=20)
    checklist: list[str] = Field(default_factory=list)
    changes: list[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: object) -> object:
        if isinstance(value, str):
            return RoomType.from_name(value) or value
        return value


class RoomUpdate(RoomCreate):
    """Full replacement of a room specification."""


class RoomResponse(BaseModel):
    """Schema returned to the caller."""

    id: int
    project_id: int
    type: RoomType
    length: float
    width: float
    height: float
    unit: str
    checklist: list[str]
    changes: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
