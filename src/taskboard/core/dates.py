"""Calendar-day helpers shared by the classifier, filters and scorer."""

from datetime import date, datetime, timedelta


def as_date(value: date | datetime) -> date:
    """Calendar date of a moment (datetime) or the date itself."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_blank(value) -> bool:
    """True for a missing due date: None or an empty/whitespace string."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_due_date(value) -> date | None:
    """
    Parse a due date into a calendar date.

    Accepts date/datetime objects and ISO strings, with or without a time part
    ("2025-01-20", "2025-01-20T10:00:00.000+0000", "2025-01-20 10:00").
    The time part is ignored: only the calendar day matters.
    Returns None for blank or unparseable input. Never raises.
    """
    if isinstance(value, (date, datetime)):
        return as_date(value)
    if not isinstance(value, str) or is_blank(value):
        return None

    day_part = value.strip().split("T")[0].split(" ")[0]
    try:
        return date.fromisoformat(day_part)
    except ValueError:
        return None


def day_of_week(day: date) -> int:
    """Day of week with Sunday=0 .. Saturday=6."""
    return (day.weekday() + 1) % 7


def week_bounds(today: date) -> tuple[date, date]:
    """Sunday..Saturday window containing today (inclusive)."""
    start = today - timedelta(days=day_of_week(today))
    return start, start + timedelta(days=6)


def next_week_bounds(today: date) -> tuple[date, date]:
    """The Sunday..Saturday window after the current one."""
    start = today + timedelta(days=7 - day_of_week(today))
    return start, start + timedelta(days=6)


def same_month(day: date, today: date) -> bool:
    return day.year == today.year and day.month == today.month


def days_until(due: date, today: date) -> int:
    """Calendar days from today until due (negative if past)."""
    return (due - today).days
