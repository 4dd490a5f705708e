"""Building task API schemas: list filters, create request, responses."""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Any

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)

from app.application.dtos.task import FilterCriteria, TaskCreate
from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException
from app.schemas.comment import CommentResponse
from app.schemas.user import UserSummary
from app.shared.utils.datetime import (
    day_bounds_utc,
    parse_calendar_date,
    resolve_timezone,
    utc_now,
)


class TaskFilterParams(BaseModel):
    """Query parameters for GET /buildings/{id}/tasks.

    Rejects what the filter should never see: unknown statuses, malformed
    dates, out-of-range days, reversed ranges and unknown zones. Status is
    normalised to its canonical value; other values are passed on as given.
    """

    model_config = ConfigDict(extra="ignore")

    timezone: str | None = Field(
        default=None, description="IANA zone of the dates; UTC when omitted"
    )
    status: str | None = Field(default=None, description="Task status, any case")
    assigned_to: int | None = Field(default=None, ge=1, description="Assignee user id")
    created_from: str | None = Field(
        default=None, description="First local creation day (YYYY-MM-DD)"
    )
    created_to: str | None = Field(
        default=None, description="Last local creation day (YYYY-MM-DD)"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("status")
    @classmethod
    def _status_in_enum(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return TaskStatus.from_insensitive(v).value

    @field_validator("created_from", "created_to")
    @classmethod
    def _calendar_date(cls, v: str | None, info: ValidationInfo) -> str | None:
        if v is None:
            return v
        try:
            day_bounds_utc(v, info.data.get("timezone"))
        except ValidationException as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            resolve_timezone(v)
        except ValidationException as e:
            raise ValueError(e.message) from e
        return v

    @model_validator(mode="after")
    def _range_in_order(self) -> TaskFilterParams:
        if self.created_from and self.created_to:
            if parse_calendar_date(self.created_to) < parse_calendar_date(self.created_from):
                raise ValueError("created_to must be on or after created_from")
        return self

    def to_criteria(self) -> FilterCriteria:
        """FilterCriteria for TaskQueryFilter."""
        return FilterCriteria.from_mapping(self.model_dump(exclude_none=True))


def _due_at_to_aware(v: Any) -> Any:
    """Accept YYYY-MM-DD (midnight UTC) or ISO datetime; naive datetimes are UTC."""
    if v is None or isinstance(v, datetime):
        parsed = v
    elif isinstance(v, date):
        parsed = datetime.combine(v, time.min)
    elif isinstance(v, str):
        try:
            parsed = datetime.combine(parse_calendar_date(v), time.min)
        except ValidationException:
            parsed = datetime.fromisoformat(v.replace("Z", "+00:00"))
    else:
        raise ValueError("The due date must be a valid date.")
    if parsed is not None and parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class TaskCreateRequest(BaseModel):
    """Request body for POST /buildings/{id}/tasks."""

    title: StrictStr = Field(..., max_length=255)
    description: StrictStr | None = None
    assigned_to: int | None = Field(default=None, ge=1)
    status: TaskStatus = TaskStatus.OPEN
    due_at: AwareDatetime | None = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please provide a title for the task.")
        return v

    @field_validator("due_at", mode="before")
    @classmethod
    def _due_at_aware(cls, v: Any) -> Any:
        return _due_at_to_aware(v)

    @field_validator("due_at")
    @classmethod
    def _due_at_not_past(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.astimezone(UTC).date() < utc_now().date():
            raise ValueError("The due date cannot be in the past.")
        return v

    def to_task_create(self) -> TaskCreate:
        return TaskCreate(
            title=self.title,
            description=self.description,
            assigned_to=self.assigned_to,
            status=self.status,
            due_at=self.due_at,
        )


class TaskResponse(BaseModel):
    """Task with creator, assignee and comments."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    building_id: int
    title: str
    description: str | None = None
    status: TaskStatus
    due_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    creator: UserSummary | None = None
    assignee: UserSummary | None = None
    comments: list[CommentResponse] = Field(default_factory=list)


class PageMeta(BaseModel):
    """Pagination metadata."""

    current_page: int
    per_page: int
    total: int
    last_page: int


class TaskListResponse(BaseModel):
    """One page of tasks."""

    data: list[TaskResponse]
    meta: PageMeta
