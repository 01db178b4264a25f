"""Pure task domain model - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .dates import parse_due_date


class TaskStatus(Enum):
    """Workflow status of a task."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    ON_HOLD = "On Hold"
    COMPLETED = "Completed"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value) -> "TaskStatus":
        """Map a stored status string to a status; unrecognized -> UNKNOWN."""
        if isinstance(value, cls):
            return value
        for status in cls:
            if status.value == value:
                return status
        return cls.UNKNOWN

    @property
    def rank(self) -> int:
        """Sort rank: Pending first, Completed last, unknown after everything."""
        return _STATUS_RANKS[self]

    @property
    def style_class(self) -> str:
        return _STATUS_STYLES[self]


class TaskPriority(Enum):
    """Priority of a task."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value) -> "TaskPriority":
        """Map a stored priority string to a priority; unrecognized -> UNKNOWN."""
        if isinstance(value, cls):
            return value
        for priority in cls:
            if priority.value == value:
                return priority
        return cls.UNKNOWN

    @property
    def style_class(self) -> str:
        return _PRIORITY_STYLES[self]


_STATUS_RANKS = {
    TaskStatus.PENDING: 1,
    TaskStatus.IN_PROGRESS: 2,
    TaskStatus.ON_HOLD: 3,
    TaskStatus.COMPLETED: 4,
    TaskStatus.UNKNOWN: 5,
}

_STATUS_STYLES = {
    TaskStatus.PENDING: "bg-purple-100 text-purple-800",
    TaskStatus.IN_PROGRESS: "bg-green-100 text-green-800",
    TaskStatus.COMPLETED: "bg-blue-100 text-blue-800",
    TaskStatus.ON_HOLD: "bg-yellow-100 text-yellow-800",
    TaskStatus.UNKNOWN: "bg-gray-100 text-gray-800",
}

_PRIORITY_STYLES = {
    TaskPriority.CRITICAL: "text-red-600 bg-red-50",
    TaskPriority.HIGH: "text-red-600 bg-red-50",
    TaskPriority.MEDIUM: "text-yellow-600 bg-yellow-50",
    TaskPriority.LOW: "text-green-600 bg-green-50",
    TaskPriority.UNKNOWN: "text-gray-600 bg-gray-50",
}


@dataclass
class Task:
    """A unit of work owned by a project."""

    id: int | str
    name: str
    project_id: int | str
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due: date | datetime | str | None = None
    description: str = ""
    assignee: str = ""
    tags: list[str] = field(default_factory=list)

    def __post_init__(self):
        # Stores hand over plain strings
        self.status = TaskStatus.parse(self.status)
        self.priority = TaskPriority.parse(self.priority)

    @property
    def due_date(self) -> date | None:
        """Parsed calendar due date, or None if absent or invalid."""
        return parse_due_date(self.due)

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    @classmethod
    def from_row(cls, row: dict) -> "Task":
        """Create Task from a store row (snake_case or camelCase columns)."""
        project_id = row.get("project_id", row.get("projectId"))
        due = row.get("due_date", row.get("dueDate"))
        tags = row.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        return cls(
            id=row["id"],
            name=row.get("name") or "",
            project_id=project_id,
            status=row.get("status"),
            priority=row.get("priority"),
            due=due,
            description=row.get("description") or "",
            assignee=row.get("assignee") or "",
            tags=list(tags),
        )


@dataclass
class Project:
    """A named grouping of tasks."""

    id: int | str
    name: str = ""
    description: str = ""
    archived: bool = False

    @classmethod
    def from_row(cls, row: dict) -> "Project":
        """Create Project from a store row."""
        return cls(
            id=row["id"],
            name=row.get("name") or "",
            description=row.get("description") or "",
            archived=bool(row.get("archived", False)),
        )


def active_projects(projects: list[Project]) -> list[Project]:
    """Projects that can receive new tasks (not archived)."""
    return [p for p in projects if not p.archived]


def project_name(projects: list[Project], project_id) -> str:
    """Resolve a project's name; "Unknown Project" if it is not in the list."""
    project = next((p for p in projects if p.id == project_id), None)
    return project.name if project else "Unknown Project"
