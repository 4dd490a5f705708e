"""Task use cases: list building tasks with filters, create tasks, add comments."""

from app.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskService"]
