"""Bearer token authentication dependency."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.v1.dependencies.db import get_user_repo
from app.application.dtos.user import UserResult
from app.domain.exceptions import AuthenticationException
from app.infrastructure.persistence.repositories import UserRepository
from app.infrastructure.security.jwt import user_id_from_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult:
    """Return the user named by the bearer token's sub claim.

    Raises AuthenticationException (401) when the header is missing, the
    token does not verify, or the user no longer exists.
    """
    if not credentials:
        raise AuthenticationException()
    try:
        user_id = user_id_from_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Rejected bearer token: %s", e)
        raise AuthenticationException() from e
    user = await user_repo.get_result_by_id(user_id)
    if user is None:
        raise AuthenticationException()
    return user
