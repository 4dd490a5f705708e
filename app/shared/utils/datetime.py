"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().

Client-supplied calendar dates are relative to the client's timezone.
start_of_day_utc / end_of_day_utc turn a (date, IANA zone) pair into the
UTC instants that bound that local day, so stored UTC timestamps can be
compared against them directly.
"""

import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.domain.exceptions import InvalidDateException, InvalidTimezoneException

DEFAULT_TIMEZONE = "UTC"

_CALENDAR_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ONE_TICK = timedelta(microseconds=1)


@dataclass(frozen=True)
class DateBoundary:
    """UTC instants bounding one local calendar day (both inclusive)."""

    start: datetime
    end: datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12
        - datetime.now(UTC) - correct but verbose

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    # Aware datetime - convert to UTC
    return dt.astimezone(UTC)


def resolve_timezone(name: str | None) -> ZoneInfo:
    """
    Resolve an IANA zone name, defaulting to UTC when missing.

    Args:
        name: IANA identifier (e.g. "Asia/Ho_Chi_Minh"), or None/"" for UTC

    Returns:
        ZoneInfo for the zone

    Raises:
        InvalidTimezoneException: If name is not a known IANA identifier
    """
    if not name:
        name = DEFAULT_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        # ValueError covers malformed keys such as absolute paths
        raise InvalidTimezoneException(name) from e


def parse_calendar_date(value: date | str) -> date:
    """
    Parse a strict YYYY-MM-DD calendar date.

    date instances pass through unchanged; datetime instances are rejected
    because a time-of-day has no meaning here.

    Args:
        value: Calendar date or its ISO string

    Returns:
        The parsed date

    Raises:
        InvalidDateException: If value is not a valid YYYY-MM-DD date
    """
    if isinstance(value, datetime):
        raise InvalidDateException(value.isoformat())
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _CALENDAR_DATE_RE.fullmatch(value):
        raise InvalidDateException(str(value))
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateException(value) from e


def _local_midnight_utc(day: date, tz: ZoneInfo, days_after: int = 0) -> datetime:
    # Bounds of 0001-01-01 and 9999-12-31 can fall outside the datetime range
    try:
        local = datetime.combine(day + timedelta(days=days_after), time.min, tzinfo=tz)
        return local.astimezone(UTC)
    except OverflowError as e:
        raise InvalidDateException(day.isoformat()) from e


def start_of_day_utc(value: date | str, timezone: str | None = DEFAULT_TIMEZONE) -> datetime:
    """
    Return the UTC instant of local midnight of ``value`` in ``timezone``.

    The timezone is validated before the date.

    Args:
        value: Calendar date (YYYY-MM-DD)
        timezone: IANA zone name; None or "" means UTC

    Returns:
        UTC-aware datetime

    Raises:
        InvalidTimezoneException: If timezone is unknown
        InvalidDateException: If value is not a calendar date, or its local
            midnight is outside the representable UTC range
    """
    tz = resolve_timezone(timezone)
    return _local_midnight_utc(parse_calendar_date(value), tz)


def end_of_day_utc(value: date | str, timezone: str | None = DEFAULT_TIMEZONE) -> datetime:
    """
    Return the UTC instant of the last microsecond of ``value`` in ``timezone``.

    Computed as the next local midnight minus one microsecond, so days
    shortened or lengthened by a DST transition are bounded correctly.

    Raises:
        InvalidTimezoneException: If timezone is unknown
        InvalidDateException: If value is not a calendar date, or the day ends
            past 9999-12-31 UTC
    """
    tz = resolve_timezone(timezone)
    day = parse_calendar_date(value)
    return _local_midnight_utc(day, tz, days_after=1) - _ONE_TICK


def day_bounds_utc(value: date | str, timezone: str | None = DEFAULT_TIMEZONE) -> DateBoundary:
    """Return both UTC bounds of the local calendar day."""
    return DateBoundary(
        start=start_of_day_utc(value, timezone),
        end=end_of_day_utc(value, timezone),
    )
