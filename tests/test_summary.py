"""Tests for dashboard summary text."""

from datetime import date, timedelta

import pytest

from taskboard.core.due_dates import BucketScheme
from taskboard.core.stats import TaskStats
from taskboard.core.summary import (
    STARTER_PARAGRAPH,
    format_task_line,
    inspiring_message,
    progress_paragraph,
)
from taskboard.core.tasks import Task


@pytest.fixture
def today():
    return date(2025, 1, 15)


class TestInspiringMessage:
    def test_overdue_and_due_today(self):
        stats = TaskStats(total_overdue=1, tasks_due_today=1, productivity_score=95)
        assert inspiring_message(stats).startswith("Time to power through!")

    def test_due_today(self):
        stats = TaskStats(tasks_due_today=2, productivity_score=95)
        assert inspiring_message(stats).startswith("Today's the day!")

    @pytest.mark.parametrize(
        "score,prefix",
        [(90, "Outstanding!"), (75, "Excellent work!"), (60, "Good progress!")],
    )
    def test_score_bands(self, score, prefix):
        assert inspiring_message(TaskStats(productivity_score=score)).startswith(prefix)

    def test_some_progress(self):
        stats = TaskStats(total_completed=1, productivity_score=30)
        assert inspiring_message(stats).startswith("Every step counts!")

    def test_nothing_done(self):
        assert inspiring_message(TaskStats()).startswith("Today is full of possibilities!")


class TestProgressParagraph:
    def test_nothing_completed(self):
        assert progress_paragraph(TaskStats(total_tasks=3)) == STARTER_PARAGRAPH

    def test_full_paragraph(self):
        stats = TaskStats(
            total_tasks=4,
            total_completed=2,
            completion_rate=50,
            total_overdue=1,
            tasks_due_today=2,
            productivity_score=50,
        )
        assert progress_paragraph(stats) == (
            "You've completed 2 out of 4 tasks (50% completion rate), "
            "with 1 task overdue that need immediate attention, "
            "and 2 tasks due today. "
            "Your current productivity score is 50/100 - let's focus on catching up and building momentum. "
            "Keep pushing forward with the remaining 2 tasks!"
        )

    def test_all_caught_up(self):
        stats = TaskStats(total_tasks=2, total_completed=2, completion_rate=100, productivity_score=100)
        paragraph = progress_paragraph(stats)
        assert "- excellent performance!" in paragraph
        assert paragraph.endswith("All caught up - fantastic work!")


class TestFormatTaskLine:
    def test_includes_status_due_and_project(self, today):
        task = Task(id=1, name="Ship it", project_id=1, status="In Progress", priority="High",
                    due=today + timedelta(days=2))
        assert format_task_line(task, today, "Website") == (
            "- [In Progress] Ship it (2 days left, High, project: Website)"
        )

    def test_summary_scheme_without_project(self, today):
        task = Task(id=1, name="Later", project_id=1, priority="Low", due=today + timedelta(days=2))
        line = format_task_line(task, today, scheme=BucketScheme.SUMMARY)
        assert line == "- [Pending] Later (2 days remaining, Low)"
