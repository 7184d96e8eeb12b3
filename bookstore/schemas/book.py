from pydantic import Field, ValidationInfo, field_validator, model_validator
from datetime import datetime
from decimal import Decimal
import uuid

from bookstore.schemas.common import CamelModel


def _trim_required(v: str, field: str) -> str:
    if isinstance(v, str):
        v = v.strip()
    if not v:
        raise ValueError(f"{field} cannot be empty")
    return v

# Book create schema
class BookCreate(CamelModel):
    title: str
    author: str
    publisher: str
    publication_year: int = Field(ge=0, le=9999)
    isbn: str | None = None
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    stock: int = Field(ge=0)
    description: str | None = None
    genre_id: uuid.UUID | None = None
    genre: str | None = None

    @field_validator("title", "author", "publisher", mode="before")
    @classmethod
    def trim_and_check(cls, v: str, info: ValidationInfo) -> str:
        return _trim_required(v, info.field_name)

    @field_validator("isbn", "genre", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            v = v.strip()
        return v or None

    @model_validator(mode="after")
    def genre_reference(self) -> "BookCreate":
        if self.genre_id is None and self.genre is None:
            raise ValueError("Please provide a genre name or genre_id")
        return self

# Book update schema (partial)
class BookUpdate(CamelModel):
    title: str | None = None
    author: str | None = None
    publisher: str | None = None
    publication_year: int | None = Field(default=None, ge=0, le=9999)
    isbn: str | None = None
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    stock: int | None = Field(default=None, ge=0)
    description: str | None = None
    genre_id: uuid.UUID | None = None

    @field_validator("title", "author", "publisher", "isbn", mode="before")
    @classmethod
    def trim_and_check(cls, v: str | None, info: ValidationInfo) -> str | None:
        if v is None:
            return v
        return _trim_required(v, info.field_name)


class GenreSummary(CamelModel):
    id: uuid.UUID
    name: str

# Book read schema
class BookRead(CamelModel):
    id: uuid.UUID
    title: str
    author: str
    publisher: str
    publication_year: int
    isbn: str
    price: Decimal
    stock: int
    description: str | None = None
    genre_id: uuid.UUID
    genre: GenreSummary
    created_at: datetime
    updated_at: datetime
