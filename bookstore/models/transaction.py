from __future__ import annotations
import uuid
import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    CheckConstraint,
    Constraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    Uuid,
    func,
)
from bookstore.models.base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from bookstore.models.book import Book
    from bookstore.models.user import User

#Transaction
class Transaction(UUIDPrimaryKeyMixin, Base):
    __tablename__: str = "transactions"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    user: Mapped[User] = relationship()
    details: Mapped[list[TransactionDetail]] = relationship(
        back_populates="transaction",
        order_by="TransactionDetail.position",
        cascade="all, delete-orphan",
    )

#Transaction Details
class TransactionDetail(UUIDPrimaryKeyMixin, Base):
    __tablename__: str = "transaction_details"

    transaction_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    book_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("books.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    # index of the line in the request
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, comment="unit price at transaction time"
    )
    subtotal: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)

    transaction: Mapped[Transaction] = relationship(back_populates="details")
    book: Mapped[Book] = relationship()

    __table_args__: tuple[Constraint, ...] = (
        CheckConstraint("quantity > 0", name="transaction_details_qty_positive"),
    )
