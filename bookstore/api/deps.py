from typing import Annotated

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bookstore.core.exceptions import Unauthorized
from bookstore.core.logging import get_logger
from bookstore.core.security import AuthenticatedUser, decode_access_token
from bookstore.db.session import get_db

_bearer = HTTPBearer(auto_error=False)

DbSession = Annotated[Session, Depends(get_db)]


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> AuthenticatedUser:
    """Resolve the bearer token into an identity, or fail with 401."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthorized("Access token is required")

    try:
        user = decode_access_token(credentials.credentials)
    except (jwt.PyJWTError, ValueError) as e:
        get_logger(__name__, request).info("Rejected bearer token: %s", e)
        raise Unauthorized("Invalid or expired token") from e

    return user


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
