"""Order processing and reporting over sales transactions.

Creating a transaction validates the whole request first (books exist, stock
covers the summed demand per book), snapshots prices, then writes the
transaction, its lines and the stock decrements in one database transaction.
"""
from __future__ import annotations

import uuid
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from bookstore.core.exceptions import (
    InsufficientStock,
    InvalidInput,
    NotFound,
    Unauthorized,
)
from bookstore.core.logging import get_logger
from bookstore.core.security import AuthenticatedUser
from bookstore.models.book import Book
from bookstore.models.transaction import Transaction, TransactionDetail
from bookstore.repos.book_repo import BookRepository
from bookstore.repos.transaction_repo import TransactionRepository
from bookstore.schemas.transaction import TransactionCreate, TransactionStatistics

logger = get_logger(__name__)

_CENTS = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def _parse_id(value: uuid.UUID | str) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


def _insufficient(book: Book, requested: int, available: int) -> InsufficientStock:
    return InsufficientStock(
        f"Insufficient stock for book {book.title}",
        details={
            "bookId": str(book.id),
            "requested": requested,
            "available": available,
        },
    )


class TransactionService:
    @staticmethod
    def create_transaction(
        db: Session, user: AuthenticatedUser | None, data: TransactionCreate
    ) -> Transaction:
        if user is None:
            raise Unauthorized("Authentication required to create a transaction")
        if not data.items:
            raise InvalidInput("Items are required to create a transaction")

        ids = [_parse_id(item.book_id) for item in data.items]

        # Demand per distinct book, in order of first appearance
        demand: dict[uuid.UUID, int] = {}
        for book_id, item in zip(ids, data.items):
            if book_id is not None:
                demand[book_id] = demand.get(book_id, 0) + item.quantity

        try:
            books = BookRepository.get_many_for_update(db, demand.keys())

            for book_id, item in zip(ids, data.items):
                if book_id is None or book_id not in books:
                    raise NotFound(f"Book with ID {item.book_id} not found")

            for book_id, requested in demand.items():
                book = books[book_id]
                if book.stock < requested:
                    raise _insufficient(book, requested, book.stock)

            # Price snapshot taken from the rows fetched above
            lines: list[TransactionDetail] = []
            for position, (book_id, item) in enumerate(zip(ids, data.items)):
                price = books[book_id].price
                lines.append(
                    TransactionDetail(
                        book_id=book_id,
                        position=position,
                        quantity=item.quantity,
                        price=price,
                        subtotal=_money(price * item.quantity),
                    )
                )
            total = sum((line.subtotal for line in lines), Decimal("0"))

            transaction = TransactionRepository.add(db, user.id, _money(total), lines)

            for book_id, requested in demand.items():
                if not BookRepository.try_decrement_stock(db, book_id, requested):
                    # Stock moved under us since validation
                    book = books[book_id]
                    db.rollback()
                    current = BookRepository.get(db, book_id)
                    available = current.stock if current is not None else 0
                    logger.warning(
                        "Stock for book %s changed during checkout", book_id
                    )
                    raise _insufficient(book, requested, available)

            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(
            "Created transaction %s for user %s (%d lines, total %s)",
            transaction.id,
            user.id,
            len(lines),
            transaction.total_amount,
        )
        return TransactionService.get_transaction(db, transaction.id)

    @staticmethod
    def list_transactions(db: Session) -> list[Transaction]:
        return TransactionRepository.list(db)

    @staticmethod
    def get_transaction(db: Session, transaction_id: uuid.UUID | str) -> Transaction:
        parsed = _parse_id(transaction_id)
        transaction = TransactionRepository.get(db, parsed) if parsed is not None else None
        if transaction is None:
            raise NotFound("Transaction not found")
        return transaction

    @staticmethod
    def get_statistics(db: Session) -> TransactionStatistics:
        """
        Count, average and revenue over all transactions, plus the most and
        least popular genres by copies sold. Ties go to the lowest genre id.
        """
        count, revenue = TransactionRepository.totals(db)
        average = _money(revenue / count) if count else Decimal("0")

        by_genre = TransactionRepository.quantity_by_genre(db)
        most_popular: str | None = None
        least_popular: str | None = None
        if count and by_genre:
            most_popular = min(by_genre, key=lambda g: (-g[2], g[0]))[1]
            least_popular = min(by_genre, key=lambda g: (g[2], g[0]))[1]

        return TransactionStatistics(
            total_transactions=count,
            average_transaction=float(average),
            total_books_sold=TransactionRepository.total_quantity(db),
            total_revenue=float(_money(revenue)),
            most_popular_genre=most_popular,
            least_popular_genre=least_popular,
        )
