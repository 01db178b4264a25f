"""taskboard CLI - task list, dashboard and deadline reminders."""

import json
import logging
import sys
from dataclasses import asdict
from datetime import date, datetime

import click

from .adapters.common import StoreError
from .config import ConfigurationError, load_config
from .core.due_dates import BucketScheme, classify_due_date, classify_task
from .core.filters import DueBucket, FilterConfig, TimeWindow, group_by_status, search
from .core.notifications import NotificationLog
from .core.summary import format_task_line
from .core.tasks import TaskPriority, TaskStatus, active_projects
from .workflows import build_dashboard, build_task_list, check_deadlines, get_repository, load_snapshot

logger = logging.getLogger(__name__)

STATUS_CHOICES = ["All"] + [s.value for s in TaskStatus if s is not TaskStatus.UNKNOWN]
PRIORITY_CHOICES = ["All"] + [p.value for p in TaskPriority if p is not TaskPriority.UNKNOWN]
SCHEME_CHOICES = [s.value for s in BucketScheme]


def _parse_id(value: str | None):
    """Store ids are integers; keep anything else as a string."""
    if value is None:
        return None
    return int(value) if value.isdigit() else value


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load():
    """Load config and a snapshot of the store, exiting on failure."""
    config = load_config()
    try:
        repo = get_repository(config)
        return config, load_snapshot(repo)
    except (ConfigurationError, StoreError) as e:
        _fail(str(e))


def _scheme(value: str | None, config) -> BucketScheme:
    try:
        return BucketScheme(value or config.bucket_scheme)
    except ValueError:
        logger.warning(f"Unknown bucket scheme {config.bucket_scheme!r}, using detailed")
        return BucketScheme.DETAILED


def _task_dict(task, now, scheme: BucketScheme, project: str) -> dict:
    due = classify_task(task, now, scheme)
    due_date = task.due_date
    return {
        "id": task.id,
        "name": task.name,
        "project_id": task.project_id,
        "project": project,
        "status": task.status.value,
        "priority": task.priority.value,
        "due_date": due_date.isoformat() if due_date else None,
        "due_label": due.text,
        "urgency": int(due.urgency),
    }


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """taskboard - project task tracking from the terminal."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command()
@click.option("--project", "project_id", default=None, help="Only tasks of this project id")
@click.option("--status", type=click.Choice(STATUS_CHOICES), default="All")
@click.option("--priority", type=click.Choice(PRIORITY_CHOICES), default="All")
@click.option("--search", "query", default="", help="Match name or description")
@click.option("--due", "due_bucket", type=click.Choice([b.value for b in DueBucket]), default="All")
@click.option("--window", type=click.Choice([w.value for w in TimeWindow]), default=None,
              help="Time window for completed tasks")
@click.option("--scheme", type=click.Choice(SCHEME_CHOICES), default=None)
@click.option("--grouped", is_flag=True, help="Group into overdue/status sections")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(project_id, status, priority, query, due_bucket, window, scheme, grouped, as_json):
    """List tasks, filtered and sorted by status."""
    config, snapshot = _load()
    now = datetime.now()
    bucket_scheme = _scheme(scheme, config)

    try:
        filters = FilterConfig(
            project_id=_parse_id(project_id),
            status=status,
            priority=priority,
            search=query,
            due_bucket=due_bucket,
            time_window=window or config.time_window,
        )
    except ValueError as e:
        _fail(f"Invalid filter: {e}")

    listed = build_task_list(snapshot, filters, now)

    if as_json:
        click.echo(
            json.dumps(
                [_task_dict(t, now, bucket_scheme, snapshot.project_name(t.project_id)) for t in listed],
                indent=2,
            )
        )
        return

    if not listed:
        click.echo("No tasks match.")
        return

    if grouped:
        for title, section in group_by_status(listed, now).sections():
            click.echo(f"### {title} ({len(section)})")
            for task in section:
                click.echo(format_task_line(task, now, snapshot.project_name(task.project_id), bucket_scheme))
            click.echo()
        return

    for task in listed:
        click.echo(format_task_line(task, now, snapshot.project_name(task.project_id), bucket_scheme))


@main.command()
@click.option("--project", "project_id", default=None, help="Scope to one project id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def dashboard(project_id, as_json):
    """Show productivity stats and progress summary."""
    _, snapshot = _load()
    board = build_dashboard(snapshot, _parse_id(project_id), datetime.now())
    stats = board.stats

    if as_json:
        click.echo(
            json.dumps(
                {
                    "scope": board.scope,
                    "stats": asdict(stats),
                    "band": board.band.name.lower(),
                    "message": board.message,
                    "summary": board.paragraph,
                    "completed_late": [
                        {"id": late.task.id, "name": late.task.name, "days_late": late.days_late}
                        for late in board.late
                    ],
                },
                indent=2,
            )
        )
        return

    click.echo(f"Dashboard - {board.scope}\n")
    click.echo(board.message)
    click.echo()
    click.echo(f"Productivity score: {stats.productivity_score}/100 ({board.band.label})")
    click.echo(f"Completion rate:    {stats.completion_rate}%")
    click.echo(f"On time:            {stats.on_time_percentage}%")
    click.echo(
        f"Tasks: {stats.total_tasks} total, {stats.total_completed} completed, "
        f"{stats.total_pending} pending, {stats.total_in_progress} in progress, "
        f"{stats.total_on_hold} on hold"
    )
    click.echo(
        f"Overdue: {stats.total_overdue}  Due today: {stats.tasks_due_today}  "
        f"Due this week: {stats.tasks_due_this_week}"
    )
    if board.late:
        click.echo("\nCompleted late:")
        for late in board.late:
            click.echo(f"  - {late.task.name} ({late.days_late}d late)")
    click.echo()
    click.echo(board.paragraph)


@main.command()
@click.argument("due_date")
@click.option("--scheme", type=click.Choice(SCHEME_CHOICES), default=None)
def due(due_date: str, scheme: str | None):
    """Classify a due date (YYYY-MM-DD) against today."""
    config = load_config()
    status = classify_due_date(due_date, date.today(), _scheme(scheme, config))
    click.echo(status.text)


@main.command("search")
@click.argument("query")
@click.option("--limit", default=8, show_default=True)
def search_cmd(query: str, limit: int):
    """Search projects and tasks."""
    _, snapshot = _load()
    results = search(snapshot.projects, snapshot.tasks, query, limit=limit)
    if not results:
        click.echo("No results.")
        return
    for result in results:
        click.echo(f"[{result.kind}] {result.title} - {result.subtitle}")


@main.command()
def projects():
    """List projects."""
    _, snapshot = _load()
    if not snapshot.projects:
        click.echo("No projects yet.")
        return

    for project in snapshot.projects:
        marker = " (archived)" if project.archived else ""
        click.echo(f"• {project.name}{marker}")

    if not active_projects(snapshot.projects):
        click.echo("\nNo active projects - create one before adding tasks.")


@main.command()
@click.option("--interval", type=int, default=None, help="Minutes between checks")
def watch(interval: int | None):
    """Print new deadline reminders on a fixed interval."""
    from apscheduler.schedulers.blocking import BlockingScheduler
    from apscheduler.triggers.interval import IntervalTrigger

    config = load_config()
    try:
        repo = get_repository(config)
    except ConfigurationError as e:
        _fail(str(e))

    minutes = interval or config.notify_interval_minutes
    log = NotificationLog()

    def run_check():
        try:
            reminders = check_deadlines(repo, log)
        except StoreError as e:
            logger.error(f"Deadline check failed: {e}")
            return
        for reminder in reminders:
            click.echo(f"[{reminder.title}] {reminder.message}")

    scheduler = BlockingScheduler()
    scheduler.add_job(run_check, IntervalTrigger(minutes=minutes), next_run_time=datetime.now())
    logger.info(f"Checking deadlines every {minutes} minutes")

    click.echo(f"Watching deadlines every {minutes} minutes. Press Ctrl+C to stop")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        click.echo("\nStopped.")


if __name__ == "__main__":
    main()
