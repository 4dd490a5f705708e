"""Helpers for API tests: bearer headers and error-body field extraction."""

from typing import Any

from app.infrastructure.security.jwt import create_access_token


def bearer_headers(user_id: int) -> dict[str, str]:
    """Authorization header carrying a token for ``user_id``."""
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user_id)})}"}


def error_fields(body: dict[str, Any]) -> set[str]:
    """Field names named by a 422 body (request validation or domain validation)."""
    details = body.get("details")
    if isinstance(details, list):
        return {str(err["loc"][-1]) for err in details if err.get("loc")}
    if isinstance(details, dict) and details.get("field"):
        return {details["field"]}
    return set()
