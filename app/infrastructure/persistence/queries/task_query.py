"""SqlTaskQuery: TaskQuery protocol over a SQLAlchemy Select of Task.

Predicate values always become bound parameters. Status matching lowers
the stored column in SQL (LOWER(CAST(task.status AS VARCHAR)) = :param);
the stored value itself is never rewritten.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sqlalchemy import ColumnElement, Select, String, cast, func, literal, select

from app.application.filters.task_filter import Predicate, PredicateOp, TaskField
from app.infrastructure.persistence.models.task import Task

_COLUMNS: dict[TaskField, Any] = {
    TaskField.CREATED_AT: Task.created_at,
    TaskField.ASSIGNED_TO: Task.assigned_to,
    TaskField.STATUS: Task.status,
}

_OPERATORS: dict[PredicateOp, Callable[[Any, Any], ColumnElement[bool]]] = {
    PredicateOp.GTE: lambda column, value: column >= value,
    PredicateOp.LTE: lambda column, value: column <= value,
    PredicateOp.EQUALS: lambda column, value: column == value,
    PredicateOp.IEQUALS: lambda column, value: (
        func.lower(cast(column, String)) == literal(value, type_=String)
    ),
}


def to_clause(predicate: Predicate) -> ColumnElement[bool]:
    """Translate a predicate descriptor into a bound SQL expression."""
    column = _COLUMNS[predicate.field]
    return _OPERATORS[predicate.op](column, predicate.value)


class SqlTaskQuery:
    """Immutable wrapper around ``select(Task)``; where() returns a new query."""

    __slots__ = ("statement",)

    def __init__(self, statement: Select[tuple[Task]] | None = None) -> None:
        self.statement = statement if statement is not None else select(Task)

    @classmethod
    def for_building(cls, building_id: int) -> SqlTaskQuery:
        """Tasks owned by one building."""
        return cls(select(Task).where(Task.building_id == building_id))

    def where(self, predicate: Predicate) -> SqlTaskQuery:
        return SqlTaskQuery(self.statement.where(to_clause(predicate)))

    def __repr__(self) -> str:
        return f"SqlTaskQuery({self.statement})"
