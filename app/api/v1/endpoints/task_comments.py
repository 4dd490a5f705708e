"""Task comment API."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_current_user, get_task_service_transactional
from app.application.dtos.user import UserResult
from app.application.use_cases.tasks import TaskService
from app.schemas.comment import CommentCreateRequest, CommentResponse

router = APIRouter()


@router.post("/{task_id:int}/comments", response_model=CommentResponse, status_code=201)
async def create_task_comment(
    task_id: int,
    body: CommentCreateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service_transactional)],
    user: Annotated[UserResult, Depends(get_current_user)],
):
    """Add a comment to the task as the calling user."""
    created = await task_svc.add_comment(task_id, body.body, user.id)
    return CommentResponse.model_validate(created)
