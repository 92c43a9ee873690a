"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist.

    Carries the looked-up field name and value so callers can build a precise
    response without parsing the message.
    """

    entity_type = "Entity"

    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"{self.entity_type} is not found with {field}: {value}")


class ClientNotFoundError(EntityNotFoundError):
    """Raised when no client matches the given key."""

    entity_type = "Client"


class ProjectNotFoundError(EntityNotFoundError):
    """Raised when no project (or project status) matches the given key."""

    entity_type = "Project"


class RoomNotFoundError(EntityNotFoundError):
    """Raised when no room (or room type) matches the given key."""

    entity_type = "Room"


class InvalidArgumentError(Exception):
    """Raised when required input is missing or would break a relationship rule."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
