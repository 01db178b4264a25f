"""Dashboard summary text - no I/O dependencies."""

from datetime import date, datetime

from .due_dates import BucketScheme, classify_task
from .stats import TaskStats, score_band, ScoreBand
from .tasks import Task

STARTER_PARAGRAPH = (
    "You're at the starting line of something great! With your organized approach "
    "and clear goals, you're perfectly positioned to tackle your tasks efficiently. "
    "Time to turn those plans into action!"
)

_BAND_REMARKS = {
    ScoreBand.EXCELLENT: " - excellent performance!",
    ScoreBand.GOOD: " - solid progress with room for improvement.",
    ScoreBand.NEEDS_WORK: " - let's focus on catching up and building momentum.",
}


def _plural(count: int, word: str = "task") -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def inspiring_message(stats: TaskStats) -> str:
    """Headline message for the dashboard, picked from the current stats."""
    if stats.total_overdue > 0 and stats.tasks_due_today > 0:
        return "Time to power through! You have overdue tasks and deadlines today. Focus mode activated!"
    if stats.tasks_due_today > 0:
        return "Today's the day! You have tasks due today. Let's knock them out one by one!"
    if stats.productivity_score >= 90:
        return "Outstanding! You're a productivity champion! Your exceptional performance is truly inspiring."
    if stats.productivity_score >= 75:
        return "Excellent work! You're consistently delivering great results. Keep up this fantastic momentum!"
    if stats.productivity_score >= 60:
        return "Good progress! You're building strong habits. A few tweaks and you'll be unstoppable!"
    if stats.total_completed > 0:
        return "Every step counts! You're making progress. Focus on one task at a time and watch your success grow!"
    return "Today is full of possibilities! Start with one small task and build your momentum from there!"


def progress_paragraph(stats: TaskStats) -> str:
    """Casual one-paragraph progress report."""
    if stats.total_completed == 0:
        return STARTER_PARAGRAPH

    paragraph = (
        f"You've completed {stats.total_completed} out of {stats.total_tasks} tasks "
        f"({stats.completion_rate}% completion rate)"
    )
    if stats.total_overdue > 0:
        paragraph += f", with {_plural(stats.total_overdue)} overdue that need immediate attention"
    if stats.tasks_due_today > 0:
        paragraph += f", and {_plural(stats.tasks_due_today)} due today"

    paragraph += f". Your current productivity score is {stats.productivity_score}/100"
    paragraph += _BAND_REMARKS[score_band(stats.productivity_score)]

    if stats.remaining > 0:
        paragraph += f" Keep pushing forward with the remaining {_plural(stats.remaining)}!"
    else:
        paragraph += " All caught up - fantastic work!"
    return paragraph


def format_task_line(
    task: Task,
    now: date | datetime,
    project: str = "",
    scheme: BucketScheme = BucketScheme.DETAILED,
) -> str:
    """
    Format a single task for terminal display.

    Pure function - no I/O.
    """
    due = classify_task(task, now, scheme)
    project_part = f", project: {project}" if project else ""
    return (
        f"- [{task.status.value}] {task.name} "
        f"({due.text}, {task.priority.value}{project_part})"
    )
