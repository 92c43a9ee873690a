"""Identity and audit timestamps shared by every entity."""

from dataclasses import dataclass
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AuditStamp:
    """Store-generated identifier plus creation/update timestamps.

    Embedded in Client, Project and Room. Services call ``stamp_created`` before
    the first write and ``touch`` before every later one.
    """

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def stamp_created(self) -> None:
        now = utcnow()
        self.created_at = now
        self.updated_at = now

    def touch(self) -> None:
        self.updated_at = utcnow()


class Audited:
    """Read-only accessors over an embedded ``audit`` stamp.

    Holds no state of its own: entities own an ``AuditStamp`` and this mixin
    only forwards ``id``, ``created_at`` and ``updated_at`` to it.
    """

    audit: AuditStamp

    @property
    def id(self) -> int | None:
        return self.audit.id

    @property
    def created_at(self) -> datetime | None:
        return self.audit.created_at

    @property
    def updated_at(self) -> datetime | None:
        return self.audit.updated_at
