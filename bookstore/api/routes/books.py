from fastapi import APIRouter, Depends, Path, Query
from decimal import Decimal
from typing import Annotated
import uuid
from starlette.status import HTTP_201_CREATED

from bookstore.api.deps import CurrentUser, DbSession
from bookstore.models.book import Book
from bookstore.repos.book_repo import BookFilter
from bookstore.schemas.book import BookCreate, BookRead, BookUpdate
from bookstore.schemas.common import ApiResponse, PaginatedResponse, PaginationMeta
from bookstore.services.book_service import BookService
from bookstore.utils.pagination import clamp_pagination, total_pages

router = APIRouter(prefix="/books", tags=["books"])

BookId = Annotated[uuid.UUID, Path(description="Book ID")]


def _book_filter(
    search: Annotated[str | None, Query()] = None,
    author: Annotated[str | None, Query()] = None,
    publisher: Annotated[str | None, Query()] = None,
    min_price: Annotated[Decimal | None, Query(alias="minPrice", ge=0)] = None,
    max_price: Annotated[Decimal | None, Query(alias="maxPrice", ge=0)] = None,
) -> BookFilter:
    return BookFilter(
        search=search,
        author=author,
        publisher=publisher,
        min_price=min_price,
        max_price=max_price,
    )


def _paginated(books: list[Book], total: int, page: int, limit: int) -> PaginatedResponse[BookRead]:
    page, limit = clamp_pagination(page, limit)
    return PaginatedResponse[BookRead](
        message="Books retrieved successfully",
        data=[BookRead.model_validate(b) for b in books],
        pagination=PaginationMeta(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages(total, limit),
        ),
    )


@router.post("", response_model=ApiResponse[BookRead], status_code=HTTP_201_CREATED)
def create_book(data: BookCreate, db: DbSession, _user: CurrentUser):
    book = BookService.create_book(db, data)
    return ApiResponse[BookRead](
        message="Book created successfully",
        data=BookRead.model_validate(book),
    )


@router.get("", response_model=PaginatedResponse[BookRead])
def list_books(
    db: DbSession,
    filters: Annotated[BookFilter, Depends(_book_filter)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
):
    books, total = BookService.list_books(db, filters, page=page, limit=limit)
    return _paginated(books, total, page, limit)


@router.get("/genre/{genre_id}", response_model=PaginatedResponse[BookRead])
def list_books_by_genre(
    genre_id: Annotated[uuid.UUID, Path(description="Genre ID")],
    db: DbSession,
    filters: Annotated[BookFilter, Depends(_book_filter)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
):
    books, total = BookService.list_books_by_genre(
        db, genre_id, filters, page=page, limit=limit
    )
    return _paginated(books, total, page, limit)


@router.get("/{book_id}", response_model=ApiResponse[BookRead])
def get_book(book_id: BookId, db: DbSession):
    book = BookService.get_book(db, book_id)
    return ApiResponse[BookRead](
        message="Book details retrieved successfully",
        data=BookRead.model_validate(book),
    )


@router.patch("/{book_id}", response_model=ApiResponse[BookRead])
def update_book(book_id: BookId, data: BookUpdate, db: DbSession, _user: CurrentUser):
    book = BookService.update_book(db, book_id, data)
    return ApiResponse[BookRead](
        message="Book updated successfully",
        data=BookRead.model_validate(book),
    )


@router.delete("/{book_id}", response_model=ApiResponse[None])
def delete_book(book_id: BookId, db: DbSession, _user: CurrentUser):
    BookService.delete_book(db, book_id)
    return ApiResponse[None](message="Book deleted successfully")
