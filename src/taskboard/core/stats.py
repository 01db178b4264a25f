"""Productivity scoring over a task collection - no I/O dependencies."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .dates import as_date, days_until, week_bounds
from .tasks import Task, TaskStatus

COMPLETION_WEIGHT = 0.4
ON_TIME_WEIGHT = 0.3
OVERDUE_WEIGHT = 0.3
# Each overdue task costs double its share of the total
OVERDUE_PENALTY = 200


@dataclass
class TaskStats:
    """Aggregate statistics for a task set. Percentages are 0-100 integers."""

    total_tasks: int = 0
    total_completed: int = 0
    total_pending: int = 0
    total_in_progress: int = 0
    total_on_hold: int = 0
    total_overdue: int = 0
    tasks_due_today: int = 0
    tasks_due_this_week: int = 0
    on_time_percentage: int = 0
    completion_rate: int = 0
    productivity_score: int = 0
    total_days_ahead: int = 0

    @property
    def remaining(self) -> int:
        return self.total_tasks - self.total_completed


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3)."""
    return math.floor(value + 0.5)


def percentage(part: int, whole: int) -> int:
    """Rounded percentage, 0 when whole is 0."""
    if whole == 0:
        return 0
    return round_half_up(part * 100 / whole)


def productivity_score(total: int, completed: int, overdue: int, on_time_percentage: int) -> int:
    """
    Weighted 0-100 score: 40% completion, 30% on-time, 30% overdue penalty.

    0 when there are no tasks.
    """
    if total == 0:
        return 0

    completion_score = completed / total * 100
    overdue_score = max(0.0, 100 - overdue / total * OVERDUE_PENALTY)
    return round_half_up(
        completion_score * COMPLETION_WEIGHT
        + on_time_percentage * ON_TIME_WEIGHT
        + overdue_score * OVERDUE_WEIGHT
    )


def compute_stats(tasks: list[Task], now: date | datetime) -> TaskStats:
    """
    Summarize a task set.

    Tasks without a parseable due date never count as on time, overdue, or
    due today/this week. "On time" means a completed task whose due date has
    not passed yet as of now; no completion timestamp is tracked.
    """
    today = as_date(now)
    week_start, week_end = week_bounds(today)

    completed = [t for t in tasks if t.is_completed]
    open_dated = [(t, t.due_date) for t in tasks if not t.is_completed and t.due_date is not None]

    on_time = [d for d in (t.due_date for t in completed) if d is not None and d >= today]
    overdue = [t for t, due in open_dated if due < today]
    due_today = [t for t, due in open_dated if due == today]
    due_this_week = [t for t, due in open_dated if week_start <= due <= week_end]

    total = len(tasks)
    on_time_percentage = percentage(len(on_time), len(completed))

    return TaskStats(
        total_tasks=total,
        total_completed=len(completed),
        total_pending=sum(1 for t in tasks if t.status is TaskStatus.PENDING),
        total_in_progress=sum(1 for t in tasks if t.status is TaskStatus.IN_PROGRESS),
        total_on_hold=sum(1 for t in tasks if t.status is TaskStatus.ON_HOLD),
        total_overdue=len(overdue),
        tasks_due_today=len(due_today),
        tasks_due_this_week=len(due_this_week),
        on_time_percentage=on_time_percentage,
        completion_rate=percentage(len(completed), total),
        productivity_score=productivity_score(total, len(completed), len(overdue), on_time_percentage),
        total_days_ahead=sum(max(0, days_until(d, today)) for d in on_time),
    )


@dataclass
class LateTask:
    """A completed task whose due date has already passed."""

    task: Task
    days_late: int


def completed_late(tasks: list[Task], now: date | datetime) -> list[LateTask]:
    """Completed tasks past their due date, with how many days late."""
    today = as_date(now)
    late = []
    for task in tasks:
        due = task.due_date
        if task.is_completed and due is not None and due < today:
            late.append(LateTask(task=task, days_late=-days_until(due, today)))
    return late


class ScoreBand(Enum):
    """Display band of a productivity score."""

    EXCELLENT = ("excellent performance", "green")
    GOOD = ("solid progress", "yellow")
    NEEDS_WORK = ("needs attention", "red")

    def __init__(self, label: str, color: str):
        self.label = label
        self.color = color

    @property
    def text_class(self) -> str:
        return f"text-{self.color}-600"

    @property
    def bar_class(self) -> str:
        return f"bg-{self.color}-500"


def score_band(score: int) -> ScoreBand:
    if score >= 80:
        return ScoreBand.EXCELLENT
    if score >= 60:
        return ScoreBand.GOOD
    return ScoreBand.NEEDS_WORK
