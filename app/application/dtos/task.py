"""DTOs for building tasks, comments and task filtering (no dependency on ORM)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from app.application.dtos.user import UserResult
from app.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskCommentResult:
    """Comment on a task."""

    id: int
    task_id: int
    body: str
    created_at: datetime
    updated_at: datetime
    created_by: int | None = None
    creator: UserResult | None = None


@dataclass(frozen=True)
class TaskResult:
    """Task owned by a building, with creator/assignee/comments when loaded."""

    id: int
    building_id: int
    created_by: int | None
    assigned_to: int | None
    title: str
    description: str | None
    status: TaskStatus
    due_at: datetime | None
    created_at: datetime
    updated_at: datetime
    creator: UserResult | None = None
    assignee: UserResult | None = None
    comments: tuple[TaskCommentResult, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TaskCreate:
    """Validated input for creating a task in a building."""

    title: str
    description: str | None = None
    assigned_to: int | None = None
    status: TaskStatus = TaskStatus.OPEN
    due_at: datetime | None = None


@dataclass(frozen=True)
class FilterCriteria:
    """Optional task filter dimensions; None means no constraint.

    Dates are YYYY-MM-DD calendar dates in ``timezone`` (UTC when absent).
    Values are kept as supplied; TaskQueryFilter parses them so that a bad
    date or zone surfaces as InvalidDateException / InvalidTimezoneException.
    """

    created_from: date | str | None = None
    created_to: date | str | None = None
    assigned_to: int | None = None
    status: str | None = None
    timezone: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FilterCriteria:
        """Build criteria from validated request input (unknown keys ignored)."""
        return cls(
            created_from=data.get("created_from"),
            created_to=data.get("created_to"),
            assigned_to=data.get("assigned_to"),
            status=data.get("status"),
            timezone=data.get("timezone"),
        )
