"""TaskComment ORM model. Deleted with its task."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampedModel

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.task import Task
    from app.infrastructure.persistence.models.user import User


class TaskComment(TimestampedModel, Base):
    """Comment on a task. Table: task_comment."""

    __tablename__ = "task_comment"

    task_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("task.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_by: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)

    task: Mapped[Task] = relationship(back_populates="comments", lazy="raise")
    creator: Mapped[User | None] = relationship(lazy="raise")
