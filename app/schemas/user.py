"""User summary schema (nested in task and comment responses)."""

from pydantic import BaseModel, ConfigDict


class UserSummary(BaseModel):
    """Creator / assignee as shown to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
