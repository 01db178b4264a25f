"""Functional core - pure business logic with no I/O."""

from .tasks import Task, Project, TaskStatus, TaskPriority, active_projects
from .due_dates import BucketScheme, DueDateStatus, Urgency, classify_due_date, classify_task
from .filters import (
    DueBucket,
    FilterConfig,
    TimeWindow,
    filter_and_sort,
    filter_tasks,
    group_by_status,
    search,
    sort_by_status,
)
from .stats import TaskStats, compute_stats, completed_late, score_band
from .summary import inspiring_message, progress_paragraph, format_task_line
from .notifications import Notification, NotificationLog, deadline_notifications

__all__ = [
    # Tasks
    "Task",
    "Project",
    "TaskStatus",
    "TaskPriority",
    "active_projects",
    # Due dates
    "BucketScheme",
    "DueDateStatus",
    "Urgency",
    "classify_due_date",
    "classify_task",
    # Filters
    "DueBucket",
    "FilterConfig",
    "TimeWindow",
    "filter_and_sort",
    "filter_tasks",
    "group_by_status",
    "search",
    "sort_by_status",
    # Stats
    "TaskStats",
    "compute_stats",
    "completed_late",
    "score_band",
    # Summary
    "inspiring_message",
    "progress_paragraph",
    "format_task_line",
    # Notifications
    "Notification",
    "NotificationLog",
    "deadline_notifications",
]
