from .user_repo import UserRepository
from .genre_repo import GenreRepository
from .book_repo import BookFilter, BookRepository
from .transaction_repo import TransactionRepository

__all__ = [
    "UserRepository",
    "GenreRepository",
    "BookFilter",
    "BookRepository",
    "TransactionRepository",
]
