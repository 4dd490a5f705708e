"""Repository and task service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.tasks import TaskService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    BuildingRepository,
    TaskCommentRepository,
    TaskRepository,
    UserRepository,
)


def _build_task_service(db: AsyncSession) -> TaskService:
    return TaskService(
        building_repo=BuildingRepository(db),
        task_repo=TaskRepository(db),
        comment_repo=TaskCommentRepository(db),
        user_repo=UserRepository(db),
    )


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for read operations (token subject lookup)."""
    return UserRepository(db)


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """Task service for read operations (filtered listing)."""
    return _build_task_service(db)


async def get_task_service_transactional(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """Task service for writes; commits when the request succeeds."""
    return _build_task_service(db)
