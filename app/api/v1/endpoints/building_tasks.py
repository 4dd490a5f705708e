"""Building task API: filtered listing and creation, delegating to TaskService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import (
    PageParams,
    get_current_user,
    get_page_params,
    get_task_service,
    get_task_service_transactional,
)
from app.application.dtos.user import UserResult
from app.application.use_cases.tasks import TaskService
from app.schemas.task import (
    PageMeta,
    TaskCreateRequest,
    TaskFilterParams,
    TaskListResponse,
    TaskResponse,
)

router = APIRouter()


@router.get("/{building_id:int}/tasks", response_model=TaskListResponse)
async def list_building_tasks(
    building_id: int,
    filters: Annotated[TaskFilterParams, Query()],
    paging: Annotated[PageParams, Depends(get_page_params)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    _user: Annotated[UserResult, Depends(get_current_user)],
):
    """List a building's tasks filtered by status, assignee and local creation dates."""
    result = await task_svc.list_building_tasks(
        building_id,
        filters.to_criteria(),
        page=paging.page,
        per_page=paging.per_page,
    )
    return TaskListResponse(
        data=[TaskResponse.model_validate(t) for t in result.items],
        meta=PageMeta(
            current_page=result.page,
            per_page=result.per_page,
            total=result.total,
            last_page=result.last_page,
        ),
    )


@router.post("/{building_id:int}/tasks", response_model=TaskResponse, status_code=201)
async def create_building_task(
    building_id: int,
    body: TaskCreateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service_transactional)],
    user: Annotated[UserResult, Depends(get_current_user)],
):
    """Create a task in the building; the caller becomes its creator."""
    created = await task_svc.create_task(building_id, body.to_task_create(), user.id)
    return TaskResponse.model_validate(created)
