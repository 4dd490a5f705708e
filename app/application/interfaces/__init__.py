"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IBuildingRepository,
    ITaskCommentRepository,
    ITaskRepository,
    IUserRepository,
)

__all__ = [
    "IBuildingRepository",
    "ITaskCommentRepository",
    "ITaskRepository",
    "IUserRepository",
]
