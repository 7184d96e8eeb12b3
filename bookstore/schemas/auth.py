from pydantic import EmailStr, field_validator, model_validator
import uuid
from datetime import datetime

from bookstore.schemas.common import CamelModel


# Registration payload
class RegisterRequest(CamelModel):
    username: str
    email: EmailStr
    password: str

    @field_validator("username", mode="before")
    @classmethod
    def trim_username(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError("username cannot be empty")
        return v

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("password cannot be empty")
        return v

# Login payload: username or email
class LoginRequest(CamelModel):
    username: str | None = None
    email: str | None = None
    password: str

    @model_validator(mode="after")
    def identifier_present(self) -> "LoginRequest":
        if not self.username and not self.email:
            raise ValueError("username or email is required")
        return self

# Public user view
class UserRead(CamelModel):
    id: uuid.UUID
    username: str
    email: str


class UserProfile(UserRead):
    created_at: datetime
    updated_at: datetime


class TokenData(CamelModel):
    token: str
    user: UserRead
