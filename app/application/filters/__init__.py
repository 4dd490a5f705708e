"""Query filters: build predicate descriptors from criteria and fold them onto a query."""

from app.application.filters.task_filter import (
    Predicate,
    PredicateOp,
    TaskField,
    TaskQuery,
    TaskQueryFilter,
    build_task_predicates,
)

__all__ = [
    "Predicate",
    "PredicateOp",
    "TaskField",
    "TaskQuery",
    "TaskQueryFilter",
    "build_task_predicates",
]
