"""Shared utilities: telemetry (logging) and cross-cutting datetime helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    DateBoundary,
    day_bounds_utc,
    end_of_day_utc,
    ensure_utc,
    start_of_day_utc,
    utc_now,
)

__all__ = [
    "DateBoundary",
    "day_bounds_utc",
    "end_of_day_utc",
    "ensure_utc",
    "start_of_day_utc",
    "utc_now",
]
