"""Due-date classification into urgency buckets - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, IntEnum

from .dates import as_date, days_until, is_blank, parse_due_date
from .tasks import Task


class Urgency(IntEnum):
    """Urgency rank of a due-date bucket. Higher is more urgent."""

    NONE = 0
    LATER = 1
    SOON = 2
    TOMORROW = 3
    TODAY = 4
    OVERDUE = 5


class BucketScheme(Enum):
    """
    How far-off due dates are bucketed.

    DETAILED: 2-3 days out gets its own yellow "days left" bucket (task list,
    task detail). SUMMARY: anything past tomorrow is green "days remaining"
    (dashboard summary cards).
    """

    DETAILED = "detailed"
    SUMMARY = "summary"


@dataclass(frozen=True)
class DueDateStatus:
    """Display-ready classification of a due date."""

    text: str
    urgency: Urgency
    color_class: str
    bg_class: str


def _status(text: str, urgency: Urgency, color: str) -> DueDateStatus:
    return DueDateStatus(text, urgency, f"text-{color}-600", f"bg-{color}-50")


def classify_due_date(
    due,
    now: date | datetime,
    scheme: BucketScheme = BucketScheme.DETAILED,
) -> DueDateStatus:
    """
    Classify a due date relative to now.

    Uses the calendar-day difference only, so a task due today is "Due today"
    at any hour. Never raises: blank input is "No due date", unparseable input
    is "Invalid date".
    """
    if is_blank(due):
        return _status("No due date", Urgency.NONE, "gray")

    due_date = parse_due_date(due)
    if due_date is None:
        return _status("Invalid date", Urgency.NONE, "gray")

    diff = days_until(due_date, as_date(now))

    if diff < 0:
        return _status(f"{abs(diff)} days overdue", Urgency.OVERDUE, "red")
    if diff == 0:
        return _status("Due today", Urgency.TODAY, "orange")
    if diff == 1:
        return _status("Due tomorrow", Urgency.TOMORROW, "yellow")
    if scheme is BucketScheme.SUMMARY:
        return _status(f"{diff} days remaining", Urgency.LATER, "green")
    if diff <= 3:
        return _status(f"{diff} days left", Urgency.SOON, "yellow")
    return _status(f"{diff} days left", Urgency.LATER, "green")


def classify_task(
    task: Task,
    now: date | datetime,
    scheme: BucketScheme = BucketScheme.DETAILED,
) -> DueDateStatus:
    """Classify a task's due date."""
    return classify_due_date(task.due, now, scheme)
