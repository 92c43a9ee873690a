"""SQLAlchemy ORM model for the Room entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from interior_planner.infrastructure.database.base import Base


class RoomModel(Base):
    """ORM model for the 'rooms' table.

    ``project_id`` is unique: it is the single stored side of the one-to-one
    project ↔ room link.
    """

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    length: Mapped[float] = mapped_column(Float, nullable=False)
    width: Mapped[float] = mapped_column(Float, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str] = mapped_column(String(20), nullable=False, default="m")
    checklist: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    changes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (Index("ix_rooms_type", "type"),)

    def __repr__(self) -> str:
        return f"<RoomModel(id={self.id}, project_id={self.project_id}, type='{self.type}')>"
