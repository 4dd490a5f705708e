"""Building repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.building import BuildingResult
from app.infrastructure.persistence.models.building import Building
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc


def _to_result(b: Building) -> BuildingResult:
    """Map Building ORM to BuildingResult DTO."""
    return BuildingResult(
        id=b.id,
        user_id=b.user_id,
        name=b.name,
        address=b.address,
        created_at=ensure_utc(b.created_at),
        updated_at=ensure_utc(b.updated_at),
    )


class BuildingRepository(BaseRepository[Building]):
    """Building repository. Implements IBuildingRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Building)

    async def get_result_by_id(self, building_id: int) -> BuildingResult | None:
        """Return building DTO by id, or None."""
        building = await self.get_by_id(building_id)
        return _to_result(building) if building is not None else None

    async def create_building(
        self, name: str, *, address: str | None = None, user_id: int | None = None
    ) -> BuildingResult:
        """Create a building (seed scripts and tests)."""
        building = await self.create(
            Building(name=name, address=address, user_id=user_id)
        )
        return _to_result(building)
