"""SQL implementations of application query protocols."""

from app.infrastructure.persistence.queries.task_query import SqlTaskQuery

__all__ = ["SqlTaskQuery"]
