import uuid
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from bookstore.models.user import User


class UserRepository:

    @staticmethod
    # Create a new user (caller commits)
    def create(db: Session, username: str, email: str, password_hash: str) -> User:
        user = User(username=username, email=email, password_hash=password_hash)
        db.add(user)
        db.flush()
        return user

    @staticmethod
    # Get a user by id
    def get(db: Session, user_id: uuid.UUID) -> User | None:
        return db.get(User, user_id)

    @staticmethod
    # Find a user matching either username or email
    def find_by_username_or_email(
        db: Session, username: str | None, email: str | None
    ) -> User | None:
        conditions = []
        if username:
            conditions.append(User.username == username)
        if email:
            conditions.append(User.email == email)
        if not conditions:
            return None
        stmt = select(User).where(or_(*conditions)).order_by(User.created_at)
        return db.scalars(stmt).first()
