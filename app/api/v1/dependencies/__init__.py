"""Presentation-layer dependency injection (composition root).

Routes depend only on these; repositories and services are built here.
"""

from app.api.v1.dependencies.auth import get_current_user
from app.api.v1.dependencies.common import PageParams, get_page_params, resolve_per_page
from app.api.v1.dependencies.db import (
    get_task_service,
    get_task_service_transactional,
    get_user_repo,
)

__all__ = [
    "PageParams",
    "get_current_user",
    "get_page_params",
    "get_task_service",
    "get_task_service_transactional",
    "get_user_repo",
    "resolve_per_page",
]
