"""Task ORM model. Belongs to a building; optionally created by / assigned to a user."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import TaskStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampedModel

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.building import Building
    from app.infrastructure.persistence.models.task_comment import TaskComment
    from app.infrastructure.persistence.models.user import User


class Task(TimestampedModel, Base):
    """Building task. Table: task.

    status is stored as the canonical TaskStatus value (e.g. "In Progress")
    in a VARCHAR column; non-members are rejected on write.
    """

    __tablename__ = "task"

    building_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("building.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_by: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    assigned_to: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[TaskStatus] = mapped_column(
        Enum(
            TaskStatus,
            name="task_status",
            native_enum=False,
            create_constraint=True,
            length=32,
            values_callable=lambda enum: enum.values(),
            validate_strings=True,
        ),
        nullable=False,
        default=TaskStatus.OPEN,
    )
    due_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    building: Mapped[Building] = relationship(back_populates="tasks", lazy="raise")
    creator: Mapped[User | None] = relationship(foreign_keys=[created_by], lazy="raise")
    assignee: Mapped[User | None] = relationship(foreign_keys=[assigned_to], lazy="raise")
    comments: Mapped[list[TaskComment]] = relationship(
        back_populates="task",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TaskComment.id",
        lazy="raise",
    )

    __table_args__ = (
        Index("ix_task_building_created", "building_id", "created_at"),
        Index("ix_task_assigned", "building_id", "assigned_to"),
    )
