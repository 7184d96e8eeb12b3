from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    CheckConstraint,
    Constraint,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
)
import uuid
from decimal import Decimal
from bookstore.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from bookstore.models.genre import Genre

#Book
class Book(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__: str = "books"

    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    publisher: Mapped[str] = mapped_column(String(255), nullable=False)
    publication_year: Mapped[int] = mapped_column(Integer, nullable=False)
    isbn: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    genre_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("genres.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    genre: Mapped[Genre] = relationship(back_populates="books")

    __table_args__: tuple[Constraint, ...] = (
            CheckConstraint("price >= 0", name="books_price_nonneg"),
            CheckConstraint("stock >= 0", name="books_stock_nonneg"),
    )
