"""Page of results returned by paginated repository queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items plus the numbers needed to render page links."""

    items: tuple[T, ...]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        """Last page number; 1 when there are no items."""
        return max(1, -(-self.total // self.per_page))
