"""Application DTOs (no ORM dependency)."""

from app.application.dtos.building import BuildingResult
from app.application.dtos.pagination import Page
from app.application.dtos.task import (
    FilterCriteria,
    TaskCommentResult,
    TaskCreate,
    TaskResult,
)
from app.application.dtos.user import UserResult

__all__ = [
    "BuildingResult",
    "FilterCriteria",
    "Page",
    "TaskCommentResult",
    "TaskCreate",
    "TaskResult",
    "UserResult",
]
