from sqlalchemy.orm import Session

from bookstore.core.exceptions import Conflict, InvalidCredentials, NotFound
from bookstore.core.logging import get_logger
from bookstore.core.security import (
    AuthenticatedUser,
    create_access_token,
    hash_password,
    verify_password,
)
from bookstore.models.user import User
from bookstore.repos.user_repo import UserRepository
from bookstore.schemas.auth import LoginRequest, RegisterRequest, TokenData, UserRead

logger = get_logger(__name__)


class AuthService:
    @staticmethod
    # Register a new account
    def register(db: Session, data: RegisterRequest) -> User:
        if UserRepository.find_by_username_or_email(db, data.username, data.email):
            raise Conflict("Username or email already exists")

        user = UserRepository.create(
            db,
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
        )
        db.commit()
        db.refresh(user)
        logger.info("Registered user %s", user.id)
        return user

    @staticmethod
    # Verify credentials and issue a bearer token
    def login(db: Session, data: LoginRequest) -> TokenData:
        user = UserRepository.find_by_username_or_email(db, data.username, data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            raise InvalidCredentials("Invalid credentials")

        token = create_access_token(user.id, user.username, user.email)
        return TokenData(token=token, user=UserRead.model_validate(user))

    @staticmethod
    # Profile of the token holder
    def get_profile(db: Session, identity: AuthenticatedUser) -> User:
        user = UserRepository.get(db, identity.id)
        if user is None:
            raise NotFound("User not found")
        return user
