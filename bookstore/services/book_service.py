from __future__ import annotations
import uuid
from sqlalchemy.orm import Session

from bookstore.core.exceptions import Conflict, InvalidInput, NotFound
from bookstore.core.logging import get_logger
from bookstore.models.book import Book
from bookstore.models.genre import Genre
from bookstore.repos.book_repo import BookFilter, BookRepository
from bookstore.repos.genre_repo import GenreRepository
from bookstore.schemas.book import BookCreate, BookUpdate

logger = get_logger(__name__)


class BookService:
    @staticmethod
    # Pick the explicit genre, or match/create one by name
    def _resolve_genre(db: Session, data: BookCreate) -> Genre:
        if data.genre_id is not None:
            genre = GenreRepository.get(db, data.genre_id)
            if genre is None:
                raise NotFound(f"Genre with id {data.genre_id} not found")
            return genre

        if data.genre is None:
            raise InvalidInput("Please provide a genre name or genre_id")
        genre = GenreRepository.find_by_name_insensitive(db, data.genre)
        if genre is None:
            genre = GenreRepository.create(db, data.genre)
            logger.info("Created genre %s while adding a book", genre.id)
        return genre

    @staticmethod
    # Create book
    def create_book(db: Session, data: BookCreate) -> Book:
        if BookRepository.get_by_title(db, data.title):
            raise Conflict("Book with this title already exists")

        isbn = data.isbn or f"ISBN-{uuid.uuid4().hex[:13].upper()}"
        if BookRepository.get_by_isbn(db, isbn):
            raise Conflict("Book with this ISBN already exists")

        genre = BookService._resolve_genre(db, data)
        book = BookRepository.create(
            db,
            title=data.title,
            author=data.author,
            publisher=data.publisher,
            publication_year=data.publication_year,
            isbn=isbn,
            price=data.price,
            stock=data.stock,
            description=data.description,
            genre_id=genre.id,
        )
        db.commit()
        logger.info("Created book %s", book.id)
        return BookService.get_book(db, book.id)

    @staticmethod
    # List books
    def list_books(
        db: Session,
        filters: BookFilter,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Book], int]:
        return BookRepository.list(db, filters, page=page, limit=limit)

    @staticmethod
    # List books of one genre
    def list_books_by_genre(
        db: Session,
        genre_id: uuid.UUID,
        filters: BookFilter,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Book], int]:
        if GenreRepository.get(db, genre_id) is None:
            raise NotFound("Genre not found")
        scoped = BookFilter(
            search=filters.search,
            author=filters.author,
            publisher=filters.publisher,
            min_price=filters.min_price,
            max_price=filters.max_price,
            genre_id=genre_id,
        )
        return BookRepository.list(db, scoped, page=page, limit=limit)

    @staticmethod
    # Get a book
    def get_book(db: Session, book_id: uuid.UUID) -> Book:
        book = BookRepository.get(db, book_id)
        if book is None:
            raise NotFound("Book not found")
        return book

    @staticmethod
    # Partial update
    def update_book(db: Session, book_id: uuid.UUID, data: BookUpdate) -> Book:
        book = BookService.get_book(db, book_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        title = changes.get("title")
        if title and title != book.title and BookRepository.get_by_title(db, title):
            raise Conflict("Book title already exists")

        isbn = changes.get("isbn")
        if isbn and isbn != book.isbn and BookRepository.get_by_isbn(db, isbn):
            raise Conflict("ISBN already exists")

        genre_id = changes.get("genre_id")
        if genre_id and genre_id != book.genre_id and GenreRepository.get(db, genre_id) is None:
            raise NotFound("Genre not found")

        for field, value in changes.items():
            setattr(book, field, value)

        db.commit()
        logger.info("Updated book %s", book_id)
        return BookService.get_book(db, book_id)

    @staticmethod
    # Delete a book that no transaction references
    def delete_book(db: Session, book_id: uuid.UUID) -> None:
        book = BookService.get_book(db, book_id)
        if BookRepository.count_transaction_details(db, book_id) > 0:
            raise Conflict("Cannot delete book referenced by transactions")

        BookRepository.delete(db, book)
        db.commit()
        logger.info("Deleted book %s", book_id)
