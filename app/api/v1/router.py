"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import building_tasks, health, task_comments

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(building_tasks.router, prefix="/buildings", tags=["tasks"])
api_router.include_router(task_comments.router, prefix="/tasks", tags=["comments"])
