"""Tests for calendar-day helpers."""

from datetime import date, datetime

import pytest

from taskboard.core.dates import (
    as_date,
    day_of_week,
    days_until,
    is_blank,
    next_week_bounds,
    parse_due_date,
    same_month,
    week_bounds,
)


@pytest.fixture
def today():
    # Wednesday
    return date(2025, 1, 15)


class TestParseDueDate:
    def test_plain_iso_date(self):
        assert parse_due_date("2025-01-20") == date(2025, 1, 20)

    def test_iso_datetime_keeps_calendar_day(self):
        assert parse_due_date("2025-01-20T23:59:00.000+0000") == date(2025, 1, 20)

    def test_space_separated_time(self):
        assert parse_due_date("2025-01-20 08:00") == date(2025, 1, 20)

    def test_date_object(self):
        assert parse_due_date(date(2025, 1, 20)) == date(2025, 1, 20)

    def test_datetime_object(self):
        assert parse_due_date(datetime(2025, 1, 20, 18, 30)) == date(2025, 1, 20)

    @pytest.mark.parametrize("value", [None, "", "   ", "not-a-date", "2025-13-40", 42])
    def test_unparseable_returns_none(self, value):
        assert parse_due_date(value) is None


class TestIsBlank:
    def test_none_and_empty(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank("  ")

    def test_garbage_is_not_blank(self):
        assert not is_blank("not-a-date")


class TestWeekBounds:
    def test_sunday_to_saturday(self, today):
        assert week_bounds(today) == (date(2025, 1, 12), date(2025, 1, 18))

    def test_sunday_starts_its_own_week(self):
        sunday = date(2025, 1, 12)
        assert day_of_week(sunday) == 0
        assert week_bounds(sunday) == (sunday, date(2025, 1, 18))

    def test_saturday_ends_week(self):
        saturday = date(2025, 1, 18)
        assert week_bounds(saturday) == (date(2025, 1, 12), saturday)

    def test_next_week(self, today):
        assert next_week_bounds(today) == (date(2025, 1, 19), date(2025, 1, 25))

    def test_next_week_from_saturday(self):
        assert next_week_bounds(date(2025, 1, 18)) == (date(2025, 1, 19), date(2025, 1, 25))


class TestMisc:
    def test_same_month(self, today):
        assert same_month(date(2025, 1, 1), today)
        assert not same_month(date(2024, 1, 15), today)
        assert not same_month(date(2025, 2, 1), today)

    def test_days_until(self, today):
        assert days_until(date(2025, 1, 20), today) == 5
        assert days_until(date(2025, 1, 12), today) == -3

    def test_as_date(self):
        assert as_date(datetime(2025, 1, 15, 23, 0)) == date(2025, 1, 15)
        assert as_date(date(2025, 1, 15)) == date(2025, 1, 15)
