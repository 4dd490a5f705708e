"""DTOs for buildings (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BuildingResult:
    """Building read-model; the container that scopes task queries."""

    id: int
    user_id: int | None
    name: str
    address: str | None
    created_at: datetime
    updated_at: datetime
