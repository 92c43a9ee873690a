"""Domain entity for rooms within a project."""

from dataclasses import dataclass, field
from enum import Enum

from .audit import AuditStamp, Audited


class RoomType(str, Enum):
    """Kinds of room a project can cover."""

    BEDROOM = "BEDROOM"
    BATHROOM = "BATHROOM"
    KITCHEN = "KITCHEN"
    LIVING_ROOM = "LIVING_ROOM"
    DINING_ROOM = "DINING_ROOM"
    OFFICE = "OFFICE"
    HALLWAY = "HALLWAY"
    NURSERY = "NURSERY"
    UTILITY_ROOM = "UTILITY_ROOM"

    @classmethod
    def from_name(cls, raw: str | None) -> "RoomType | None":
        """Case-insensitive, whitespace-trimmed lookup by member name."""
        if raw is None:
            return None
        wanted = raw.strip().upper()
        for member in cls:
            if member.name == wanted:
                return member
        return None


@dataclass
class Room(Audited):
    """Room specification: dimensions, checklist and change log.

    Owned by exactly one project; a project holds at most one room.
    """

    project_id: int
    type: RoomType
    length: float
    width: float
    height: float
    unit: str = "m"
    checklist: list[str] = field(default_factory=list)
    changes: list[str] = field(default_factory=list)
    audit: AuditStamp = field(default_factory=AuditStamp)

    def update(
        self,
        *,
        type: RoomType,
        length: float,
        width: float,
        height: float,
        unit: str,
        checklist: list[str],
        changes: list[str],
    ) -> None:
        """Replace the full room specification."""
        self.type = type
        self.length = length
        self.width = width
        self.height = height
        self.unit = unit
        self.checklist = list(checklist)
        self.changes = list(changes)

    def move_to(self, project_id: int) -> None:
        self.project_id = project_id
