import os

# Settings are read at import time; point them at throwaway values first
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-the-bookstore-suite")

import uuid
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.core.security import create_access_token
from bookstore.db.session import build_engine, get_db
from bookstore.main import app
from bookstore.models import Base


@pytest.fixture
def test_engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database per test, shared by every connection."""
    engine = build_engine("sqlite+pysqlite:///:memory:", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine: Engine) -> Generator[Session, None, None]:
    """Create a database session for each test."""
    TestSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def test_client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client whose requests share the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def user_credentials() -> dict[str, str]:
    suffix = uuid.uuid4().hex[:8]
    return {
        "username": f"reader_{suffix}",
        "email": f"reader_{suffix}@example.com",
        "password": "s3cret-pass",
    }


@pytest.fixture
def registered_user(test_client: TestClient, user_credentials: dict[str, str]) -> dict:
    """Register a user through the API."""
    response = test_client.post("/auth/register", json=user_credentials)
    assert response.status_code == 201, f"Failed to register user: {response.text}"
    return response.json()["data"]


@pytest.fixture
def auth_token(registered_user: dict) -> str:
    return create_access_token(
        uuid.UUID(registered_user["id"]),
        registered_user["username"],
        registered_user["email"],
    )


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """HTTP headers carrying a valid bearer token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def sample_genre(test_client: TestClient, auth_headers: dict[str, str]) -> dict:
    """Create a sample genre using the API."""
    response = test_client.post(
        "/genre", json={"name": f"Programming {uuid.uuid4().hex[:6]}"}, headers=auth_headers
    )
    assert response.status_code == 201, f"Failed to create sample genre: {response.text}"
    return response.json()["data"]


@pytest.fixture
def make_book(test_client: TestClient, auth_headers: dict[str, str], sample_genre: dict):
    """Factory creating books through the API."""

    def _make(**overrides) -> dict:
        suffix = uuid.uuid4().hex[:8]
        payload = {
            "title": f"Test Book {suffix}",
            "author": "Test Author",
            "publisher": "Test Press",
            "publicationYear": 2023,
            "isbn": f"978-{suffix}",
            "price": "10.00",
            "stock": 5,
            "description": "A book for tests",
            "genreId": sample_genre["id"],
        }
        payload.update(overrides)
        response = test_client.post("/books", json=payload, headers=auth_headers)
        assert response.status_code == 201, f"Failed to create book: {response.text}"
        return response.json()["data"]

    return _make


@pytest.fixture
def sample_book(make_book) -> dict:
    """Book{price: 10.00, stock: 5}."""
    return make_book()
