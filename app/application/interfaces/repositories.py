"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.building import BuildingResult
    from app.application.dtos.pagination import Page
    from app.application.dtos.task import TaskCommentResult, TaskCreate, TaskResult
    from app.application.dtos.user import UserResult
    from app.application.filters.task_filter import TaskQuery


# Building repository interface
class IBuildingRepository(Protocol):
    """Protocol for building repository (task container lookup)."""

    async def get_result_by_id(self, building_id: int) -> BuildingResult | None:
        """Return building by id, or None."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user repository (creators, assignees, acting user)."""

    async def get_result_by_id(self, user_id: int) -> UserResult | None:
        """Return user by id, or None."""

    async def exists(self, user_id: int) -> bool:
        """Return True when a user with this id exists."""


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for building task repository.

    query_for_building returns a TaskQuery that TaskQueryFilter narrows;
    paginate executes it.
    """

    def query_for_building(self, building_id: int) -> TaskQuery:
        """Return a query over all tasks of one building."""

    def query_all(self) -> TaskQuery:
        """Return a query over all tasks."""

    async def paginate(
        self, query: TaskQuery, *, page: int, per_page: int
    ) -> Page[TaskResult]:
        """Execute query; return one page with creator, assignee and comments loaded."""

    async def exists(self, task_id: int) -> bool:
        """Return True when a task with this id exists."""

    async def create_task(
        self, building_id: int, data: TaskCreate, created_by: int | None
    ) -> TaskResult:
        """Create a task in the building; return it with creator/assignee loaded."""


# Task comment repository interface
class ITaskCommentRepository(Protocol):
    """Protocol for task comment repository."""

    async def create_comment(
        self, task_id: int, body: str, created_by: int | None
    ) -> TaskCommentResult:
        """Create a comment on the task; return it with creator loaded."""
