"""Task repository interface."""

from typing import Protocol

from taskboard.core.tasks import Project, Task


class TaskRepository(Protocol):
    """Interface for reading tasks and projects from any backend."""

    def fetch_tasks(self) -> list[Task]:
        """Fetch all tasks visible to the current user."""
        ...

    def fetch_projects(self) -> list[Project]:
        """Fetch all projects, archived ones included."""
        ...
