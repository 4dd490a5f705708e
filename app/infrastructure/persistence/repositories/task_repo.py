"""Task repository: building-scoped queries, pagination and creation."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.pagination import Page
from app.application.dtos.task import TaskCreate, TaskResult
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.task_comment import TaskComment
from app.infrastructure.persistence.queries.task_query import SqlTaskQuery
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.task_comment_repo import (
    comment_to_result,
)
from app.infrastructure.persistence.repositories.user_repo import user_to_result
from app.shared.utils.datetime import ensure_utc

_TASK_LOAD_OPTIONS = (
    selectinload(Task.creator),
    selectinload(Task.assignee),
    selectinload(Task.comments).selectinload(TaskComment.creator),
)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM (relationships loaded) to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        building_id=t.building_id,
        created_by=t.created_by,
        assigned_to=t.assigned_to,
        title=t.title,
        description=t.description,
        status=t.status,
        due_at=ensure_utc(t.due_at),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
        creator=user_to_result(t.creator),
        assignee=user_to_result(t.assignee),
        comments=tuple(comment_to_result(c) for c in t.comments),
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    def query_for_building(self, building_id: int) -> SqlTaskQuery:
        """Query over the building's tasks; narrow it with TaskQueryFilter."""
        return SqlTaskQuery.for_building(building_id)

    def query_all(self) -> SqlTaskQuery:
        """Query over every task."""
        return SqlTaskQuery()

    async def count(self, query: SqlTaskQuery) -> int:
        """Number of tasks matching the query."""
        stmt = select(func.count()).select_from(query.statement.subquery())
        return int((await self.db.execute(stmt)).scalar_one())

    async def list_ids(self, query: SqlTaskQuery) -> list[int]:
        """Ids of all tasks matching the query, ascending."""
        stmt = query.statement.with_only_columns(Task.id).order_by(Task.id)
        return list((await self.db.execute(stmt)).scalars().all())

    async def paginate(
        self, query: SqlTaskQuery, *, page: int, per_page: int
    ) -> Page[TaskResult]:
        """Execute query ordered by id; return the requested page with relations loaded."""
        total = await self.count(query)
        stmt = (
            query.statement.options(*_TASK_LOAD_OPTIONS)
            .order_by(Task.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.db.execute(stmt)
        items = tuple(_to_result(t) for t in result.scalars().all())
        return Page(items=items, total=total, page=page, per_page=per_page)

    async def get_result_by_id(self, task_id: int) -> TaskResult | None:
        """Return task DTO with creator, assignee and comments loaded, or None."""
        result = await self.db.execute(
            select(Task)
            .where(Task.id == task_id)
            .options(*_TASK_LOAD_OPTIONS)
            .execution_options(populate_existing=True)
        )
        task = result.scalar_one_or_none()
        return _to_result(task) if task is not None else None

    async def create_task(
        self, building_id: int, data: TaskCreate, created_by: int | None
    ) -> TaskResult:
        """Create a task and return it with creator and assignee loaded."""
        task = await self.create(
            Task(
                building_id=building_id,
                created_by=created_by,
                assigned_to=data.assigned_to,
                title=data.title,
                description=data.description,
                status=data.status,
                due_at=data.due_at,
            )
        )
        result = await self.db.execute(
            select(Task)
            .where(Task.id == task.id)
            .options(*_TASK_LOAD_OPTIONS)
            .execution_options(populate_existing=True)
        )
        return _to_result(result.scalar_one())
