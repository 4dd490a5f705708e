"""Task comment repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.task import TaskCommentResult
from app.infrastructure.persistence.models.task_comment import TaskComment
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.user_repo import user_to_result
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)


def comment_to_result(c: TaskComment) -> TaskCommentResult:
    """Map TaskComment ORM (creator loaded) to TaskCommentResult DTO."""
    return TaskCommentResult(
        id=c.id,
        task_id=c.task_id,
        body=c.body,
        created_at=ensure_utc(c.created_at),
        updated_at=ensure_utc(c.updated_at),
        created_by=c.created_by,
        creator=user_to_result(c.creator),
    )


class TaskCommentRepository(BaseRepository[TaskComment]):
    """Task comment repository. Implements ITaskCommentRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TaskComment)

    async def create_comment(
        self, task_id: int, body: str, created_by: int | None
    ) -> TaskCommentResult:
        """Create a comment and return it with its creator loaded."""
        comment = await self.create(
            TaskComment(task_id=task_id, body=body, created_by=created_by)
        )
        result = await self.db.execute(
            select(TaskComment)
            .where(TaskComment.id == comment.id)
            .options(selectinload(TaskComment.creator))
            .execution_options(populate_existing=True)
        )
        return comment_to_result(result.scalar_one())

    async def _on_after_create(self, obj: TaskComment) -> None:
        logger.info("Created comment %s on task %s", obj.id, obj.task_id)
