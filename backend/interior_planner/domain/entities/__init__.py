from .audit import AuditStamp
from .client import Client
from .project import Project, ProjectDeadline, ProjectStatus
from .room import Room, RoomType

__all__ = [
    "AuditStamp",
    "Client",
    "Project",
    "ProjectDeadline",
    "ProjectStatus",
    "Room",
    "RoomType",
]
