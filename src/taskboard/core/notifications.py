"""Deadline reminders derived from the current task set - no I/O dependencies."""

from collections import deque
from dataclasses import dataclass
from datetime import date, datetime

from .due_dates import Urgency, classify_task
from .tasks import Task

MAX_NOTIFICATIONS = 50


@dataclass(frozen=True)
class Notification:
    """A reminder about one task's deadline."""

    key: str
    kind: str
    title: str
    message: str
    priority: str
    color: str


# urgency -> (kind, title, priority, color)
_REMINDERS = {
    Urgency.OVERDUE: ("deadline", "Overdue", "high", "red"),
    Urgency.TODAY: ("deadline", "Due today", "high", "orange"),
    Urgency.TOMORROW: ("task", "Due tomorrow", "medium", "purple"),
}


def deadline_notifications(tasks: list[Task], now: date | datetime) -> list[Notification]:
    """
    Reminders for open tasks that are overdue, due today or due tomorrow.

    Most urgent first; ties keep input order.
    """
    found = []
    for task in tasks:
        if task.is_completed:
            continue
        due = classify_task(task, now)
        if due.urgency not in _REMINDERS:
            continue
        kind, title, priority, color = _REMINDERS[due.urgency]
        found.append(
            (
                due.urgency,
                Notification(
                    key=f"{task.id}:{due.urgency.name.lower()}",
                    kind=kind,
                    title=title,
                    message=f"{task.name} ({due.text})",
                    priority=priority,
                    color=color,
                ),
            )
        )

    found.sort(key=lambda pair: pair[0], reverse=True)
    return [n for _, n in found]


class NotificationLog:
    """Remembers which reminders were already shown, keeping the latest 50."""

    def __init__(self, limit: int = MAX_NOTIFICATIONS):
        self._seen: set[str] = set()
        self.recent: deque[Notification] = deque(maxlen=limit)

    def record(self, notifications: list[Notification]) -> list[Notification]:
        """
        Store the reminders of one check; return only those not seen before.

        Keys absent from this check are forgotten, so the seen set never holds
        more than the currently active reminders.
        """
        fresh = []
        for notification in notifications:
            if notification.key in self._seen:
                continue
            self.recent.appendleft(notification)
            fresh.append(notification)
        self._seen = {n.key for n in notifications}
        return fresh

    def __len__(self) -> int:
        return len(self.recent)
