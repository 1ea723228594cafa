"""Request dependencies shared by the API routes."""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from healthtrack.database import get_db
from healthtrack.errors import UnauthorizedError
from healthtrack.models.user import User
from healthtrack.security import decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token to its user or fail with 401."""
    if credentials is None:
        raise UnauthorizedError()

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        logger.info("Rejected invalid or expired token")
        raise UnauthorizedError("Token is not valid")

    user = await session.get(User, user_id)
    if user is None:
        raise UnauthorizedError("Token is not valid")
    return user
