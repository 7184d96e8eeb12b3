from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from bookstore.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from bookstore.models.book import Book

#Genre
class Genre(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__: str = "genres"

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    books: Mapped[list[Book]] = relationship(
        back_populates="genre",
        order_by="Book.title",
        passive_deletes="all",
    )
