"""Domain enumerations for the building tasks application.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    Stored as the canonical value (e.g. "In Progress"). Filtering compares
    case-insensitively; storage never does.
    """

    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    REJECTED = "Rejected"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]

    @classmethod
    def from_insensitive(cls, value: str) -> "TaskStatus":
        """Return the member whose value matches ``value`` ignoring case.

        Raises:
            ValueError: If no member matches.
        """
        wanted = value.strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        raise ValueError(
            f"Invalid task status {value!r}. Accepted values: {', '.join(cls.values())}"
        )
