"""Abstract repository interface (port) for Project persistence."""

from abc import ABC, abstractmethod

from interior_planner.domain.entities import Project, ProjectDeadline, ProjectStatus


class ProjectRepository(ABC):
    """Port for project persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, project_id: int) -> Project | None:
        """Retrieve a single project, with its derived room id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Project]:
        ...

    @abstractmethod
    async def get_by_status(self, status: ProjectStatus) -> list[Project]:
        ...

    @abstractmethod
    async def get_by_client(self, client_id: int) -> list[Project]:
        """Reverse view of the client relationship."""
        ...

    @abstractmethod
    async def get_deadlines(self) -> list[ProjectDeadline]:
        """Projection of every project, ascending by due date."""
        ...

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Persist a new project and return it with the generated id."""
        ...

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Write the mutable fields (client reference included)."""
        ...

    @abstractmethod
    async def delete(self, project_id: int) -> bool:
        """Delete a project and its room. Returns True if deleted."""
        ...
