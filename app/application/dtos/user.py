"""DTOs for users referenced by buildings, tasks and comments (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model (creator, assignee, acting user). No credentials."""

    id: int
    name: str
    email: str
