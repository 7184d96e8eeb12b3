from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from bookstore.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

#User
class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__: str = "users"

    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
