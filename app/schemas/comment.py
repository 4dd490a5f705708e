"""Task comment API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from app.schemas.user import UserSummary

COMMENT_BODY_MAX_LENGTH = 1000


class CommentCreateRequest(BaseModel):
    """Request body for POST /tasks/{id}/comments. Body must be a real string."""

    body: StrictStr = Field(..., max_length=COMMENT_BODY_MAX_LENGTH)

    @field_validator("body")
    @classmethod
    def _body_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("The body field is required.")
        return v


class CommentResponse(BaseModel):
    """Comment with its creator."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    task_id: int
    body: str
    created_at: datetime
    updated_at: datetime
    creator: UserSummary | None = None
