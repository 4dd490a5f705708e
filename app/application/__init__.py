"""Application layer: DTOs, interfaces, filters, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, task queries).
"""

from app.application.filters import TaskQueryFilter
from app.application.use_cases import TaskService

__all__ = ["TaskQueryFilter", "TaskService"]
