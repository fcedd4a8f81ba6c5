"""
pytest Fixtures for Book Catalog API Tests

FIXTURE SCOPES used here:
- session scope for the engine (created once)
- function scope for sessions and clients (isolation between tests)

Every test runs inside a transaction on a shared in-memory SQLite
connection; the transaction is rolled back afterwards, so tests never see
each other's rows.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"

from collections.abc import Generator
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Book

# A moment safely in the past, used to prove that updates move updated_at
SEEDED_AT = datetime(2020, 1, 1, 12, 0, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session joins an outer transaction, so the repository's commits
    become savepoint releases and the final rollback discards everything.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    get_db is overridden so the whole handler -> service -> repository
    chain runs against db_session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def book_payload() -> dict:
    """A valid create/update body."""
    return {
        "title": "1984",
        "author": "George Orwell",
        "description": "A dystopian novel",
    }


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """
    A stored book whose timestamps are pinned to SEEDED_AT.

    Pinning makes "updated_at was refreshed" observable even though
    SQLite's CURRENT_TIMESTAMP only has one-second resolution.
    """
    book = Book(
        title="Brave New World",
        author="Aldous Huxley",
        description="A futuristic World State of genetically modified citizens.",
        created_at=SEEDED_AT,
        updated_at=SEEDED_AT,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create several books for list tests."""
    books = [
        Book(
            title=f"Test Book {i + 1}",
            author=f"Test Author {i + 1}",
            description=f"Description for book {i + 1}",
        )
        for i in range(5)
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
