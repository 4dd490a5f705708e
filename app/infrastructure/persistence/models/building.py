"""Building ORM model. A building owns its tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampedModel

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.task import Task
    from app.infrastructure.persistence.models.user import User


class Building(TimestampedModel, Base):
    """Building (task container). Table: building."""

    __tablename__ = "building"

    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)

    owner: Mapped[User | None] = relationship(lazy="raise")
    tasks: Mapped[list[Task]] = relationship(
        back_populates="building",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )
