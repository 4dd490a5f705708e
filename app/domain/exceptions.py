"""Domain exceptions for the building tasks application.

Defines domain-level exceptions that represent business rule violations
and client-input faults. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskTrackerException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskTrackerException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
            error_code: Code for subclasses that narrow the failure kind.
            details: Extra context merged after ``field``.
        """
        merged: dict[str, Any] = {"field": field} if field else {}
        merged.update(details or {})
        super().__init__(message, error_code, merged)


class InvalidTimezoneException(ValidationException):
    """Raised when a timezone name is not a recognized IANA identifier."""

    def __init__(self, timezone: str, field: str | None = None) -> None:
        super().__init__(
            f"Invalid timezone: {timezone}",
            field=field,
            error_code="INVALID_TIMEZONE",
            details={"timezone": timezone},
        )


class InvalidDateException(ValidationException):
    """Raised when a value cannot be parsed as a YYYY-MM-DD calendar date."""

    def __init__(self, date: str, field: str | None = None) -> None:
        super().__init__(
            f"Invalid date: {date}",
            field=field,
            error_code="INVALID_DATE",
            details={"date": date},
        )


class AuthenticationException(TaskTrackerException):
    """Raised when authentication fails (e.g. missing or invalid token)."""

    def __init__(self, message: str = "Unauthenticated.") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(TaskTrackerException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'building', 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SqlNotConfiguredException(TaskTrackerException):
    """Raised when an operation requires the database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
