"""In-memory TaskQuery used to exercise TaskQueryFilter without a database."""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.application.filters import Predicate, PredicateOp


@dataclass(frozen=True)
class TaskRow:
    id: int
    created_at: datetime
    status: str
    assigned_to: int | None = None


_OPS: dict[PredicateOp, Callable[[Any, Any], bool]] = {
    PredicateOp.GTE: operator.ge,
    PredicateOp.LTE: operator.le,
    PredicateOp.EQUALS: operator.eq,
    PredicateOp.IEQUALS: lambda stored, value: str(stored).lower() == value,
}


@dataclass(frozen=True)
class InMemoryTaskQuery:
    rows: tuple[TaskRow, ...]
    predicates: tuple[Predicate, ...] = field(default=())

    def where(self, predicate: Predicate) -> InMemoryTaskQuery:
        return InMemoryTaskQuery(self.rows, self.predicates + (predicate,))

    def ids(self) -> list[int]:
        return [
            row.id
            for row in self.rows
            if all(
                _OPS[p.op](getattr(row, p.field.value), p.value)
                for p in self.predicates
            )
        ]


class ExplodingTaskQuery:
    """Query whose storage fails on the first where()."""

    def where(self, predicate: Predicate) -> ExplodingTaskQuery:
        raise ConnectionError("storage unavailable")
