"""Task operations: filtered listing, creation and comments (delegate to repositories)."""

from __future__ import annotations

from app.application.dtos.pagination import Page
from app.application.dtos.task import (
    FilterCriteria,
    TaskCommentResult,
    TaskCreate,
    TaskResult,
)
from app.application.filters.task_filter import TaskQueryFilter
from app.application.interfaces.repositories import (
    IBuildingRepository,
    ITaskCommentRepository,
    ITaskRepository,
    IUserRepository,
)
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class TaskService:
    """List, create and comment on building tasks.

    Filter errors (InvalidDateException, InvalidTimezoneException) and
    storage errors are not caught here.
    """

    def __init__(
        self,
        building_repo: IBuildingRepository,
        task_repo: ITaskRepository,
        comment_repo: ITaskCommentRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.building_repo = building_repo
        self.task_repo = task_repo
        self.comment_repo = comment_repo
        self.user_repo = user_repo

    async def _require_building(self, building_id: int) -> None:
        if await self.building_repo.get_result_by_id(building_id) is None:
            raise ResourceNotFoundException("building", building_id)

    async def _require_assignee(self, assigned_to: int | None) -> None:
        if assigned_to is None:
            return
        if not await self.user_repo.exists(assigned_to):
            raise ValidationException(
                "The selected assignee does not exist.", field="assigned_to"
            )

    async def list_building_tasks(
        self,
        building_id: int,
        criteria: FilterCriteria,
        *,
        page: int = 1,
        per_page: int = 10,
    ) -> Page[TaskResult]:
        """Return one page of the building's tasks matching all criteria."""
        await self._require_building(building_id)
        await self._require_assignee(criteria.assigned_to)
        query = TaskQueryFilter(criteria).apply(
            self.task_repo.query_for_building(building_id)
        )
        return await self.task_repo.paginate(query, page=page, per_page=per_page)

    async def create_task(
        self, building_id: int, data: TaskCreate, created_by: int | None
    ) -> TaskResult:
        """Create a task in the building; assignee must exist when given."""
        await self._require_building(building_id)
        await self._require_assignee(data.assigned_to)
        task = await self.task_repo.create_task(building_id, data, created_by)
        logger.info(
            "Created task %s in building %s (status=%s)",
            task.id,
            building_id,
            task.status.value,
        )
        return task

    async def add_comment(
        self, task_id: int, body: str, created_by: int | None
    ) -> TaskCommentResult:
        """Add a comment to an existing task."""
        if not await self.task_repo.exists(task_id):
            raise ResourceNotFoundException("task", task_id)
        return await self.comment_repo.create_comment(task_id, body, created_by)
