"""Domain entity for interior design clients."""

from dataclasses import dataclass, field

from .audit import AuditStamp, Audited


@dataclass
class Client(Audited):
    """A client of the designer and their contact details.

    ``project_ids`` is the reverse side of the project relationship. It is
    filled in by the repository from the projects table on every read and is
    never written back.
    """

    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    notes: str | None = None
    project_ids: tuple[int, ...] = ()
    audit: AuditStamp = field(default_factory=AuditStamp)

    @property
    def total_projects(self) -> int:
        return len(self.project_ids)

    def update(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
        notes: str | None = None,
    ) -> None:
        """Overwrite only the supplied contact fields."""
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if email is not None:
            self.email = email
        if phone is not None:
            self.phone = phone
        if address is not None:
            self.address = address
        if notes is not None:
            self.notes = notes
