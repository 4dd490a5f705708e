"""Domain layer: enums and exceptions with no framework dependencies."""

from app.domain.enums import TaskStatus
from app.domain.exceptions import (
    AuthenticationException,
    InvalidDateException,
    InvalidTimezoneException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TaskTrackerException,
    ValidationException,
)

__all__ = [
    "AuthenticationException",
    "InvalidDateException",
    "InvalidTimezoneException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "TaskStatus",
    "TaskTrackerException",
    "ValidationException",
]
