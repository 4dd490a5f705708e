"""Pagination query parameters shared by list endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Query

from app.core.config import get_settings


@dataclass(frozen=True)
class PageParams:
    """Resolved page number and page size."""

    page: int
    per_page: int


def resolve_per_page(per_page: int | None) -> int:
    """Default when absent; clamp to [1, pagination_max_per_page]."""
    settings = get_settings()
    if per_page is None:
        return settings.pagination_default_per_page
    return max(1, min(per_page, settings.pagination_max_per_page))


def get_page_params(
    page: int = Query(1, ge=1, description="1-based page number"),
    per_page: int | None = Query(None, description="Page size (clamped)"),
) -> PageParams:
    """Page number and clamped page size from the query string."""
    return PageParams(page=page, per_page=resolve_per_page(per_page))
