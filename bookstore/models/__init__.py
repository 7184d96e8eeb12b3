from .base import Base
from .user import User
from .genre import Genre
from .book import Book
from .transaction import Transaction, TransactionDetail

__all__ = ["Base", "User", "Genre", "Book", "Transaction", "TransactionDetail"]
