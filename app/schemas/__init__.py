"""Pydantic request/response schemas for the API."""

from app.schemas.comment import CommentCreateRequest, CommentResponse
from app.schemas.health import HealthResponse
from app.schemas.task import (
    PageMeta,
    TaskCreateRequest,
    TaskFilterParams,
    TaskListResponse,
    TaskResponse,
)
from app.schemas.user import UserSummary

__all__ = [
    "CommentCreateRequest",
    "CommentResponse",
    "HealthResponse",
    "PageMeta",
    "TaskCreateRequest",
    "TaskFilterParams",
    "TaskListResponse",
    "TaskResponse",
    "UserSummary",
]
