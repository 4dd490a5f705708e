"""Row factories for tests. Every helper commits so other sessions see the row."""

from __future__ import annotations

from datetime import datetime
from itertools import count
from typing import TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.enums import TaskStatus
from app.infrastructure.persistence.models import Building, Task, TaskComment, User

_seq = count(1)

M = TypeVar("M")


class Factory:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _save(self, obj: M) -> M:
        self.session.add(obj)
        await self.session.commit()
        return obj

    async def user(self, name: str | None = None, email: str | None = None) -> User:
        n = next(_seq)
        return await self._save(
            User(name=name or f"User {n}", email=email or f"user{n}@example.com")
        )

    async def building(self, name: str = "Main Street Tower", owner: User | None = None) -> Building:
        return await self._save(
            Building(
                name=name,
                address="1 Main Street",
                user_id=owner.id if owner is not None else None,
            )
        )

    async def task(
        self,
        building: Building,
        *,
        title: str | None = None,
        status: TaskStatus = TaskStatus.OPEN,
        assigned_to: int | None = None,
        created_by: int | None = None,
        created_at: datetime | None = None,
    ) -> Task:
        task = Task(
            building_id=building.id,
            title=title or f"Task {next(_seq)}",
            status=status,
            assigned_to=assigned_to,
            created_by=created_by,
        )
        if created_at is not None:
            task.created_at = created_at
            task.updated_at = created_at
        return await self._save(task)

    async def comment(self, task: Task, body: str, created_by: int | None = None) -> TaskComment:
        return await self._save(
            TaskComment(task_id=task.id, body=body, created_by=created_by)
        )
