"""Domain entities for design projects and their deadline projection."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .audit import AuditStamp, Audited, utcnow


class ProjectStatus(str, Enum):
    """Lifecycle status of a project. Any status may follow any other."""

    PLANNING = "PLANNING"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"

    @classmethod
    def from_name(cls, raw: str | None) -> "ProjectStatus | None":
        """Case-insensitive, whitespace-trimmed lookup by member name."""
        if raw is None:
            return None
        wanted = raw.strip().upper()
        for member in cls:
            if member.name == wanted:
                return member
        return None


@dataclass
class Project(Audited):
    """A design project commissioned by exactly one client.

    ``room_id`` is derived from the rooms table on read; linking a room is done
    by writing the room's ``project_id``.
    """

    client_id: int
    name: str
    status: ProjectStatus = ProjectStatus.PLANNING
    budget: int | None = None
    start_date: date | None = None
    due_date: date | None = None
    description: str | None = None
    meeting_url: str | None = None
    completed_at: datetime | None = None
    room_id: int | None = None
    audit: AuditStamp = field(default_factory=AuditStamp)

    def update(
        self,
        *,
        name: str,
        status: ProjectStatus,
        budget: int | None,
        start_date: date | None,
        due_date: date | None,
        meeting_url: str | None,
        description: str | None = None,
        client_id: int | None = None,
    ) -> None:
        """Replace the editable fields, then apply the completion rule.

        ``description`` and ``client_id`` are only changed when given.
        """
        self.name = name
        self.status = status
        self.budget = budget
        self.start_date = start_date
        self.due_date = due_date
        self.meeting_url = meeting_url
        if description is not None:
            self.description = description
        if client_id is not None:
            self.client_id = client_id
        self._stamp_completion()

    def reassign_client(self, client_id: int) -> None:
        self.client_id = client_id

    def _stamp_completion(self) -> None:
        # Also stamps a never-completed project on its first update.
        if self.status is ProjectStatus.COMPLETED or self.completed_at is None:
            self.completed_at = utcnow()


@dataclass(frozen=True)
class ProjectDeadline:
    """Read-only projection used to list projects by due date."""

    due_date: date | None
    start_date: date | None
    name: str
    status: ProjectStatus
    client_id: int
    room_id: int | None
