"""Shared utilities: UTC datetime helpers and calendar-day boundaries."""

from app.shared.utils.datetime import (
    DEFAULT_TIMEZONE,
    DateBoundary,
    day_bounds_utc,
    end_of_day_utc,
    ensure_utc,
    parse_calendar_date,
    resolve_timezone,
    start_of_day_utc,
    utc_now,
)

__all__ = [
    "DEFAULT_TIMEZONE",
    "DateBoundary",
    "day_bounds_utc",
    "end_of_day_utc",
    "ensure_utc",
    "parse_calendar_date",
    "resolve_timezone",
    "start_of_day_utc",
    "utc_now",
]
