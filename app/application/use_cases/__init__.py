"""Application use cases (orchestrate repositories and filters)."""

from app.application.use_cases.tasks import TaskService

__all__ = ["TaskService"]
