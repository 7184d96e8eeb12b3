from pydantic import field_validator
from datetime import datetime
from decimal import Decimal
import uuid

from bookstore.schemas.common import CamelModel


def _trim_name(v: str) -> str:
    if isinstance(v, str):
        v = v.strip()
    if not v:
        raise ValueError("name cannot be empty")
    return v

# Genre create schema
class GenreCreate(CamelModel):
    name: str

    @field_validator("name", mode="before")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        return _trim_name(v)

# Genre update schema
class GenreUpdate(CamelModel):
    name: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def trim_and_check(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _trim_name(v)

# Genre read schema
class GenreRead(CamelModel):
    id: uuid.UUID
    name: str
    created_at: datetime
    updated_at: datetime


class GenreBookSummary(CamelModel):
    id: uuid.UUID
    title: str
    author: str
    price: Decimal
    stock: int

# Genre detail with its books
class GenreDetail(GenreRead):
    books: list[GenreBookSummary] = []
