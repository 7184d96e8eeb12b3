import time
import uuid
from dataclasses import dataclass

import jwt
from passlib.context import CryptContext

from bookstore.core.config import settings

# pbkdf2_sha256 first: bcrypt truncates at 72 bytes
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity carried by a verified bearer token."""

    id: uuid.UUID
    username: str
    email: str


def create_access_token(
    user_id: uuid.UUID,
    username: str,
    email: str,
    expires_delta: int | None = None,
) -> str:
    now = int(time.time())
    exp = now + (expires_delta if expires_delta is not None else settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    payload = {
        "sub": str(user_id),
        "username": username,
        "email": email,
        "iat": now,
        "exp": exp,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> AuthenticatedUser:
    """
    Verify signature and expiry. Raises jwt.PyJWTError on a bad token and
    ValueError when the claims are incomplete.
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
    username = payload.get("username")
    email = payload.get("email")
    if not isinstance(username, str) or not isinstance(email, str):
        raise ValueError("token is missing identity claims")
    return AuthenticatedUser(
        id=uuid.UUID(payload["sub"]),
        username=username,
        email=email,
    )


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)
