"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.building_repo import (
    BuildingRepository,
)
from app.infrastructure.persistence.repositories.task_comment_repo import (
    TaskCommentRepository,
)
from app.infrastructure.persistence.repositories.task_repo import TaskRepository
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "BuildingRepository",
    "TaskCommentRepository",
    "TaskRepository",
    "UserRepository",
]
