"""User repository (read side; users are provisioned outside the API)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(u: User) -> UserResult:
    """Map User ORM to UserResult DTO."""
    return UserResult(id=u.id, name=u.name, email=u.email)


def user_to_result(u: User | None) -> UserResult | None:
    """Map an optional loaded relationship (creator/assignee) to a DTO."""
    return _to_result(u) if u is not None else None


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_result_by_id(self, user_id: int) -> UserResult | None:
        """Return user DTO by id, or None."""
        user = await self.get_by_id(user_id)
        return _to_result(user) if user is not None else None

    async def create_user(self, name: str, email: str) -> UserResult:
        """Create a user (seed scripts and tests)."""
        user = await self.create(User(name=name, email=email))
        return _to_result(user)
