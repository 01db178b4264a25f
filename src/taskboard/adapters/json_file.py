"""File-based task store adapter."""

import json
from pathlib import Path

from taskboard.core.tasks import Project, Task

from .common import StoreError, parse_rows


class JsonFileStore:
    """
    Read tasks and projects from an exported JSON snapshot.

    Implements TaskRepository protocol. The file holds
    {"projects": [...], "tasks": [...]} using the backend's row format.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load(self) -> dict:
        if not self.path.exists():
            raise StoreError(f"Data file not found: {self.path}")
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid JSON in {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Expected an object in {self.path}")
        return data

    def fetch_tasks(self) -> list[Task]:
        """Fetch all tasks."""
        return parse_rows(self._load().get("tasks", []), Task.from_row, "task")

    def fetch_projects(self) -> list[Project]:
        """Fetch all projects."""
        return parse_rows(self._load().get("projects", []), Project.from_row, "project")
