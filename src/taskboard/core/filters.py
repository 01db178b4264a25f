"""Task filtering, sorting, grouping and search - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .dates import as_date, next_week_bounds, same_month, week_bounds
from .tasks import Project, Task, TaskPriority, TaskStatus, project_name

ALL = "All"


class DueBucket(Enum):
    """Due-date filter options of the task list."""

    ALL = "All"
    OVERDUE = "Overdue"
    TODAY = "Today"
    THIS_WEEK = "This Week"
    NEXT_WEEK = "Next Week"


class TimeWindow(Enum):
    """Time window applied to completed tasks."""

    ALL_TIME = "All Time"
    THIS_WEEK = "This Week"
    THIS_MONTH = "This Month"


@dataclass
class FilterConfig:
    """
    Active filters of a task view. None (or "All") disables a filter.

    All filters are AND-combined.
    """

    project_id: int | str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    search: str = ""
    due_bucket: DueBucket = DueBucket.ALL
    time_window: TimeWindow = TimeWindow.ALL_TIME

    def __post_init__(self):
        if self.status == ALL:
            self.status = None
        elif self.status is not None:
            self.status = TaskStatus.parse(self.status)

        if self.priority == ALL:
            self.priority = None
        elif self.priority is not None:
            self.priority = TaskPriority.parse(self.priority)

        # Unknown option strings are configuration errors: let ValueError out
        self.due_bucket = DueBucket(self.due_bucket)
        self.time_window = TimeWindow(self.time_window)
        self.search = self.search or ""


def _matches_search(task: Task, query: str) -> bool:
    needle = query.lower()
    return needle in (task.name or "").lower() or needle in (task.description or "").lower()


def _matches_due_bucket(task: Task, bucket: DueBucket, today: date) -> bool:
    if bucket is DueBucket.ALL:
        return True

    due = task.due_date
    if due is None:
        return False

    match bucket:
        case DueBucket.OVERDUE:
            return due < today and not task.is_completed
        case DueBucket.TODAY:
            return due == today
        case DueBucket.THIS_WEEK:
            start, end = week_bounds(today)
            return start <= due <= end
        case DueBucket.NEXT_WEEK:
            start, end = next_week_bounds(today)
            return start <= due <= end
    return True


def _matches_time_window(task: Task, window: TimeWindow, today: date) -> bool:
    """Time window only narrows completed tasks."""
    if window is TimeWindow.ALL_TIME or not task.is_completed:
        return True

    due = task.due_date
    if due is None:
        return False

    if window is TimeWindow.THIS_WEEK:
        start, end = week_bounds(today)
        return start <= due <= end
    return same_month(due, today)


def matches(task: Task, config: FilterConfig, today: date) -> bool:
    """True if the task passes every active filter."""
    if config.project_id is not None and task.project_id != config.project_id:
        return False
    # An unrecognized filter value matches no task
    if config.status is not None and (
        config.status is TaskStatus.UNKNOWN or task.status is not config.status
    ):
        return False
    if config.priority is not None and (
        config.priority is TaskPriority.UNKNOWN or task.priority is not config.priority
    ):
        return False
    if config.search and not _matches_search(task, config.search):
        return False
    return _matches_due_bucket(task, config.due_bucket, today) and _matches_time_window(
        task, config.time_window, today
    )


def filter_tasks(tasks: list[Task], config: FilterConfig, now: date | datetime) -> list[Task]:
    """
    Filter tasks by the active filters.

    Pure function - no I/O. Each task is judged on its own.
    """
    today = as_date(now)
    return [t for t in tasks if matches(t, config, today)]


def sort_by_status(tasks: list[Task]) -> list[Task]:
    """
    Sort tasks Pending, In Progress, On Hold, Completed, then unknown.

    sorted() is stable, so tasks with equal status keep their input order.
    """
    return sorted(tasks, key=lambda t: t.status.rank)


def filter_and_sort(tasks: list[Task], config: FilterConfig, now: date | datetime) -> list[Task]:
    """Filter then sort a task list for display."""
    return sort_by_status(filter_tasks(tasks, config, now))


def filter_by_project(tasks: list[Task], project_id) -> list[Task]:
    """Scope tasks to one project; None keeps every task."""
    if project_id is None:
        return list(tasks)
    return [t for t in tasks if t.project_id == project_id]


@dataclass
class TaskGroups:
    """Task-list sections, overdue tasks pulled out of their status section."""

    overdue: list[Task] = field(default_factory=list)
    pending: list[Task] = field(default_factory=list)
    in_progress: list[Task] = field(default_factory=list)
    on_hold: list[Task] = field(default_factory=list)
    completed: list[Task] = field(default_factory=list)
    other: list[Task] = field(default_factory=list)

    def sections(self) -> list[tuple[str, list[Task]]]:
        """Non-empty sections in display order."""
        ordered = [
            ("Overdue Tasks", self.overdue),
            ("Pending Tasks", self.pending),
            ("In Progress", self.in_progress),
            ("On Hold", self.on_hold),
            ("Completed", self.completed),
            ("Other", self.other),
        ]
        return [(title, tasks) for title, tasks in ordered if tasks]


def group_by_status(tasks: list[Task], now: date | datetime) -> TaskGroups:
    """Split tasks into display sections. Each task lands in exactly one."""
    today = as_date(now)
    groups = TaskGroups()
    by_status = {
        TaskStatus.PENDING: groups.pending,
        TaskStatus.IN_PROGRESS: groups.in_progress,
        TaskStatus.ON_HOLD: groups.on_hold,
        TaskStatus.COMPLETED: groups.completed,
    }

    for task in tasks:
        due = task.due_date
        if not task.is_completed and due is not None and due < today:
            groups.overdue.append(task)
        else:
            by_status.get(task.status, groups.other).append(task)
    return groups


@dataclass
class SearchResult:
    """One hit of the global search box."""

    kind: str  # "project" or "task"
    id: int | str
    title: str
    subtitle: str
    description: str = ""


def search(
    projects: list[Project],
    tasks: list[Task],
    query: str,
    limit: int = 8,
) -> list[SearchResult]:
    """
    Search projects and tasks by free text (case-insensitive).

    Projects match on name/description; tasks on name, description, assignee
    or their project's name. Projects come first, capped at limit results.
    """
    if not query or not query.strip():
        return []

    needle = query.lower()
    results = []

    for project in projects:
        if needle in (project.name or "").lower() or needle in (project.description or "").lower():
            results.append(
                SearchResult(
                    kind="project",
                    id=project.id,
                    title=project.name,
                    subtitle="Archived Project" if project.archived else "Active Project",
                    description=project.description,
                )
            )

    for task in tasks:
        owner = project_name(projects, task.project_id)
        haystack = [task.name, task.description, task.assignee, owner]
        if any(needle in (value or "").lower() for value in haystack):
            results.append(
                SearchResult(
                    kind="task",
                    id=task.id,
                    title=task.name,
                    subtitle=owner,
                    description=task.description,
                )
            )

    return results[:limit]
