from pydantic import Field, StrictInt, field_validator
from datetime import datetime
from decimal import Decimal
from typing import Annotated
import uuid

from bookstore.schemas.auth import UserRead
from bookstore.schemas.book import GenreSummary
from bookstore.schemas.common import CamelModel


# Transaction line request
class TransactionItemCreate(CamelModel):
    # Any text is accepted; ids that match no book are reported as not found
    book_id: Annotated[str, Field(min_length=1)]
    quantity: Annotated[StrictInt, Field(gt=0)]

    @field_validator("book_id", mode="before")
    @classmethod
    def id_as_text(cls, v):
        return str(v) if isinstance(v, uuid.UUID) else v

# Transaction create
class TransactionCreate(CamelModel):
    items: list[TransactionItemCreate] = Field(min_length=1)


class TransactionBook(CamelModel):
    id: uuid.UUID
    title: str
    author: str
    isbn: str
    price: Decimal
    genre: GenreSummary

# Transaction line read
class TransactionDetailRead(CamelModel):
    id: uuid.UUID
    book_id: uuid.UUID
    quantity: int
    price: Decimal
    subtotal: Decimal
    book: TransactionBook

# Transaction read
class TransactionRead(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    total_amount: Decimal
    created_at: datetime
    user: UserRead
    details: list[TransactionDetailRead] = []

# Statistics over all transactions
class TransactionStatistics(CamelModel):
    total_transactions: int
    average_transaction: float
    total_books_sold: int
    total_revenue: float
    most_popular_genre: str | None = None
    least_popular_genre: str | None = None
