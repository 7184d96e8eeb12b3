from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from decimal import Decimal
from typing import cast
import uuid

from sqlalchemy import Select, func, or_, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.orm import Session, selectinload

from bookstore.models.book import Book
from bookstore.models.transaction import TransactionDetail
from bookstore.utils.pagination import clamp_pagination, page_offset


@dataclass(frozen=True)
class BookFilter:
    """Supported filters for book listings. Text filters are case-insensitive."""

    search: str | None = None
    author: str | None = None
    publisher: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    genre_id: uuid.UUID | None = None

    def apply(self, stmt: Select) -> Select:
        if self.search:
            term = f"%{self.search.strip()}%"
            stmt = stmt.where(
                or_(
                    Book.title.ilike(term),
                    Book.author.ilike(term),
                    Book.isbn.ilike(term),
                )
            )
        if self.author:
            stmt = stmt.where(Book.author.ilike(f"%{self.author.strip()}%"))
        if self.publisher:
            stmt = stmt.where(Book.publisher.ilike(f"%{self.publisher.strip()}%"))
        if self.min_price is not None:
            stmt = stmt.where(Book.price >= self.min_price)
        if self.max_price is not None:
            stmt = stmt.where(Book.price <= self.max_price)
        if self.genre_id is not None:
            stmt = stmt.where(Book.genre_id == self.genre_id)
        return stmt


class BookRepository:

    @staticmethod
    # Create a new book (caller commits)
    def create(db: Session, **values: object) -> Book:
        book = Book(**values)
        db.add(book)
        db.flush()
        return book

    @staticmethod
    # List books matching a filter, newest first, with the total match count
    def list(
        db: Session,
        filters: BookFilter,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Book], int]:
        page, limit = clamp_pagination(page, limit)

        count_stmt = filters.apply(select(func.count()).select_from(Book))
        total = db.scalar(count_stmt) or 0

        stmt = (
            filters.apply(select(Book))
            .options(selectinload(Book.genre))
            .order_by(Book.created_at.desc(), Book.title.asc())
            .limit(limit)
            .offset(page_offset(page, limit))
        )
        return list(db.scalars(stmt).all()), total

    @staticmethod
    # Get a book by ID
    def get(db: Session, book_id: uuid.UUID) -> Book | None:
        stmt = select(Book).where(Book.id == book_id).options(selectinload(Book.genre))
        return db.scalars(stmt).first()

    @staticmethod
    # Get a book by title
    def get_by_title(db: Session, title: str) -> Book | None:
        return db.scalars(select(Book).where(Book.title == title)).first()

    @staticmethod
    # Get a book by ISBN
    def get_by_isbn(db: Session, isbn: str) -> Book | None:
        return db.scalars(select(Book).where(Book.isbn == isbn)).first()

    @staticmethod
    # Batch lookup, row-locked where the dialect supports it
    def get_many_for_update(db: Session, book_ids: Collection[uuid.UUID]) -> dict[uuid.UUID, Book]:
        if not book_ids:
            return {}
        stmt = select(Book).where(Book.id.in_(list(book_ids))).with_for_update()
        return {book.id: book for book in db.scalars(stmt).all()}

    @staticmethod
    # Decrement stock only if enough remains; False when the guard fails
    def try_decrement_stock(db: Session, book_id: uuid.UUID, qty: int) -> bool:
        upd = (
            update(Book)
            .where(Book.id == book_id, Book.stock >= qty)
            .values(stock=Book.stock - qty)
        )
        result = cast(CursorResult[object], db.execute(upd))
        return result.rowcount == 1

    @staticmethod
    # Count transaction lines referencing a book
    def count_transaction_details(db: Session, book_id: uuid.UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(TransactionDetail)
            .where(TransactionDetail.book_id == book_id)
        )
        return db.scalar(stmt) or 0

    @staticmethod
    def delete(db: Session, book: Book) -> None:
        db.delete(book)
        db.flush()
