"""Shared workflow layer between the CLI commands and the deadline watcher.

Each function loads what it needs from the configured store, runs the pure
core over it, and returns plain data for the caller to render.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .adapters.json_file import JsonFileStore
from .adapters.supabase_rest import SupabaseAdapter
from .config import Config, ConfigurationError
from .core.filters import FilterConfig, filter_and_sort, filter_by_project
from .core.notifications import Notification, NotificationLog, deadline_notifications
from .core.stats import LateTask, ScoreBand, TaskStats, completed_late, compute_stats, score_band
from .core.summary import inspiring_message, progress_paragraph
from .core.tasks import Project, Task, project_name
from .ports.task_repo import TaskRepository

logger = logging.getLogger(__name__)


def get_repository(config: Config) -> TaskRepository:
    """Pick the task store from config: local JSON snapshot wins over REST."""
    if config.data_file:
        return JsonFileStore(Path(config.data_file).expanduser())
    if config.supabase_url and config.supabase_key:
        return SupabaseAdapter(url=config.supabase_url, key=config.supabase_key)
    raise ConfigurationError(
        "No task store configured. Set DATA_FILE or SUPABASE_URL and SUPABASE_KEY in taskboard.conf"
    )


@dataclass
class Snapshot:
    """Tasks and projects as read from the store at one moment."""

    tasks: list[Task]
    projects: list[Project]

    def project_name(self, project_id) -> str:
        return project_name(self.projects, project_id)


def load_snapshot(repo: TaskRepository) -> Snapshot:
    """Read tasks and projects from the store."""
    tasks = repo.fetch_tasks()
    projects = repo.fetch_projects()
    logger.info(f"Loaded {len(tasks)} tasks across {len(projects)} projects")
    return Snapshot(tasks=tasks, projects=projects)


def build_task_list(snapshot: Snapshot, filters: FilterConfig, now: datetime | None = None) -> list[Task]:
    """Filtered, status-sorted task list."""
    now = now or datetime.now()
    return filter_and_sort(snapshot.tasks, filters, now)


@dataclass
class Dashboard:
    """Everything the dashboard view renders."""

    scope: str
    stats: TaskStats
    band: ScoreBand
    message: str
    paragraph: str
    late: list[LateTask]


def build_dashboard(snapshot: Snapshot, project_id=None, now: datetime | None = None) -> Dashboard:
    """Compute dashboard stats for all tasks or one project."""
    now = now or datetime.now()
    tasks = filter_by_project(snapshot.tasks, project_id)
    stats = compute_stats(tasks, now)
    return Dashboard(
        scope=snapshot.project_name(project_id) if project_id is not None else "All Projects",
        stats=stats,
        band=score_band(stats.productivity_score),
        message=inspiring_message(stats),
        paragraph=progress_paragraph(stats),
        late=completed_late(tasks, now),
    )


def check_deadlines(
    repo: TaskRepository,
    log: NotificationLog,
    now: datetime | None = None,
) -> list[Notification]:
    """Reload tasks and return deadline reminders not shown before."""
    now = now or datetime.now()
    tasks = repo.fetch_tasks()
    fresh = log.record(deadline_notifications(tasks, now))
    logger.debug(f"Deadline check: {len(fresh)} new reminders for {len(tasks)} tasks")
    return fresh
