from __future__ import annotations

import uuid
from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from bookstore.models.book import Book
from bookstore.models.genre import Genre


class GenreRepository:

    @staticmethod
    # Create a new genre (caller commits)
    def create(db: Session, name: str) -> Genre:
        genre = Genre(name=name)
        db.add(genre)
        db.flush()
        return genre

    @staticmethod
    # List genres by name
    def list(db: Session) -> list[Genre]:
        stmt = select(Genre).order_by(Genre.name.asc())
        return list(db.scalars(stmt).all())

    @staticmethod
    # Get a genre by ID
    def get(db: Session, genre_id: uuid.UUID, with_books: bool = False) -> Genre | None:
        stmt = select(Genre).where(Genre.id == genre_id)
        if with_books:
            stmt = stmt.options(selectinload(Genre.books))
        return db.scalars(stmt).first()

    @staticmethod
    # Get a genre by exact name
    def get_by_name(db: Session, name: str) -> Genre | None:
        stmt = select(Genre).where(Genre.name == name)
        return db.scalars(stmt).first()

    @staticmethod
    # Get a genre by name, ignoring case
    def find_by_name_insensitive(db: Session, name: str) -> Genre | None:
        stmt = (
            select(Genre)
            .where(func.lower(Genre.name) == name.lower())
            .order_by(Genre.created_at)
        )
        return db.scalars(stmt).first()

    @staticmethod
    # Count books that reference a genre
    def count_books(db: Session, genre_id: uuid.UUID) -> int:
        stmt = select(func.count()).select_from(Book).where(Book.genre_id == genre_id)
        return db.scalar(stmt) or 0

    @staticmethod
    def delete(db: Session, genre: Genre) -> None:
        db.delete(genre)
        db.flush()
