"""Persistence models: ORM entities and mixins.

Importing this package registers every table on Base.metadata.
"""

from app.infrastructure.persistence.models.building import Building
from app.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    TimestampedModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.models.task_comment import TaskComment
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Building",
    "IntegerIdMixin",
    "Task",
    "TaskComment",
    "TimestampMixin",
    "TimestampedModel",
    "User",
]
