from __future__ import annotations

import uuid
from decimal import Decimal
from typing import cast

from sqlalchemy import Row, func, select
from sqlalchemy.orm import Session, selectinload

from bookstore.models.book import Book
from bookstore.models.genre import Genre
from bookstore.models.transaction import Transaction, TransactionDetail


def _with_enrichment():
    return (
        selectinload(Transaction.user),
        selectinload(Transaction.details)
        .selectinload(TransactionDetail.book)
        .selectinload(Book.genre),
    )


class TransactionRepository:
    """Repository for Transaction and TransactionDetail."""

    @staticmethod
    # Add a transaction with its lines; flush only, the service owns the commit
    def add(
        db: Session,
        user_id: uuid.UUID,
        total_amount: Decimal,
        lines: list[TransactionDetail],
    ) -> Transaction:
        transaction = Transaction(user_id=user_id, total_amount=total_amount)
        transaction.details.extend(lines)
        db.add(transaction)
        db.flush()
        return transaction

    @staticmethod
    # Get a transaction with user, lines, books and genres
    def get(db: Session, transaction_id: uuid.UUID) -> Transaction | None:
        stmt = (
            select(Transaction)
            .where(Transaction.id == transaction_id)
            .options(*_with_enrichment())
            .execution_options(populate_existing=True)
        )
        return db.scalars(stmt).first()

    @staticmethod
    # List all transactions, newest first
    def list(db: Session) -> list[Transaction]:
        stmt = (
            select(Transaction)
            .options(*_with_enrichment())
            .order_by(Transaction.created_at.desc(), Transaction.id)
        )
        return list(db.scalars(stmt).all())

    # ---- Aggregates ----
    @staticmethod
    # (count, revenue) over all transactions
    def totals(db: Session) -> tuple[int, Decimal]:
        row = db.execute(
            select(func.count(Transaction.id), func.coalesce(func.sum(Transaction.total_amount), 0))
        ).one()
        count, revenue = cast(tuple[int, Decimal | int], tuple(row))
        return int(count), Decimal(str(revenue))

    @staticmethod
    # Total copies sold across all lines
    def total_quantity(db: Session) -> int:
        total = db.scalar(select(func.coalesce(func.sum(TransactionDetail.quantity), 0)))
        return int(total or 0)

    @staticmethod
    # Copies sold per genre: (genre_id, genre_name, quantity)
    def quantity_by_genre(db: Session) -> list[tuple[uuid.UUID, str, int]]:
        stmt = (
            select(Genre.id, Genre.name, func.sum(TransactionDetail.quantity))
            .select_from(TransactionDetail)
            .join(Book, Book.id == TransactionDetail.book_id)
            .join(Genre, Genre.id == Book.genre_id)
            .group_by(Genre.id, Genre.name)
        )
        rows: list[Row[tuple[uuid.UUID, str, int]]] = list(db.execute(stmt).all())
        return [(row[0], row[1], int(row[2])) for row in rows]
