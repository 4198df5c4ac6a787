"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context
from the bearer token; no database lookup is involved.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from jobly.core.errors import ForbiddenError, UnauthorizedError
from jobly.core.security import decode_token

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class TokenUser:
    username: str
    is_admin: bool = False


async def ensure_logged_in(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenUser:
    """
    Extract and validate the current user from the JWT.

    Raises:
        UnauthorizedError: If no token was sent or it does not validate
    """
    if credentials is None:
        raise UnauthorizedError("Missing bearer token")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    username = payload.get("sub")
    if username is None:
        raise UnauthorizedError("Could not validate credentials")

    return TokenUser(username=username, is_admin=bool(payload.get("is_admin", False)))


async def ensure_admin(user: TokenUser = Depends(ensure_logged_in)) -> TokenUser:
    """
    Require a logged-in admin.

    Raises:
        ForbiddenError: If the user is logged in but not an admin
    """
    if not user.is_admin:
        raise ForbiddenError("Admin privileges required")

    return user
