"""Task query filter: created date range (client timezone aware), assignee, status.

Criteria are first turned into an immutable tuple of Predicate descriptors.
Only when every descriptor has been built are they folded onto the query,
so an invalid date or timezone leaves the query untouched.

Calendar dates are converted from the client's timezone (UTC when absent)
to UTC before comparison with stored created_at instants.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Any, Protocol, Self, TypeVar

from app.application.dtos.task import FilterCriteria
from app.shared.utils.datetime import end_of_day_utc, resolve_timezone, start_of_day_utc

logger = logging.getLogger(__name__)


class TaskField(str, Enum):
    """Task attributes a predicate may constrain."""

    CREATED_AT = "created_at"
    ASSIGNED_TO = "assigned_to"
    STATUS = "status"


class PredicateOp(str, Enum):
    """Comparison operators understood by TaskQuery implementations.

    IEQUALS compares lowercased stored value with an already lowercased value.
    """

    GTE = "gte"
    LTE = "lte"
    EQUALS = "eq"
    IEQUALS = "ieq"


@dataclass(frozen=True)
class Predicate:
    """One conjunctive constraint: ``field <op> value``."""

    field: TaskField
    op: PredicateOp
    value: Any


class TaskQuery(Protocol):
    """Queryable collection of tasks, already scoped to its container.

    where() returns a new, narrowed query; the receiver is not modified.
    Values must reach storage as bound parameters, never as query text.
    """

    def where(self, predicate: Predicate) -> Self: ...


Q = TypeVar("Q", bound=TaskQuery)


def build_task_predicates(criteria: FilterCriteria) -> tuple[Predicate, ...]:
    """Return predicates for every supplied criterion, in application order.

    Order: created_from, created_to, assigned_to, status. The timezone is
    validated before any date is parsed, and only when a date needs it.

    Raises:
        InvalidTimezoneException: criteria.timezone is not an IANA zone.
        InvalidDateException: created_from/created_to is not YYYY-MM-DD.
    """
    predicates: list[Predicate] = []
    tz = criteria.timezone or None
    if criteria.created_from or criteria.created_to:
        resolve_timezone(tz)

    if criteria.created_from:
        predicates.append(
            Predicate(
                TaskField.CREATED_AT,
                PredicateOp.GTE,
                start_of_day_utc(criteria.created_from, tz),
            )
        )
    if criteria.created_to:
        predicates.append(
            Predicate(
                TaskField.CREATED_AT,
                PredicateOp.LTE,
                end_of_day_utc(criteria.created_to, tz),
            )
        )
    if criteria.assigned_to is not None:
        predicates.append(
            Predicate(TaskField.ASSIGNED_TO, PredicateOp.EQUALS, criteria.assigned_to)
        )
    if criteria.status:
        predicates.append(
            Predicate(TaskField.STATUS, PredicateOp.IEQUALS, criteria.status.lower())
        )
    return tuple(predicates)


class TaskQueryFilter:
    """Applies FilterCriteria to a TaskQuery (logical AND across dimensions).

    Stateless apart from the criteria it was built with; safe to share
    across concurrent requests.
    """

    def __init__(self, criteria: FilterCriteria) -> None:
        self.criteria = criteria

    def predicates(self) -> tuple[Predicate, ...]:
        """Predicates for this filter's criteria (see build_task_predicates)."""
        return build_task_predicates(self.criteria)

    def apply(self, query: Q) -> Q:
        """Return query narrowed by every predicate; the same query when there are none.

        InvalidDateException / InvalidTimezoneException and storage errors
        propagate unchanged.
        """
        predicates = self.predicates()
        if not predicates:
            return query
        logger.debug(
            "Applying %d task predicate(s): %s",
            len(predicates),
            ", ".join(f"{p.field.value} {p.op.value}" for p in predicates),
        )
        return reduce(lambda q, p: q.where(p), predicates, query)
