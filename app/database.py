"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Book Catalog API.

We're using SYNCHRONOUS SQLAlchemy: route handlers are plain `def`
functions that FastAPI runs in its threadpool, and every request gets its
own session from the pool.

Session Management Pattern
==========================
"Session per request":
1. Request arrives -> create a new session
2. Repository uses that session for its single statement
3. Repository commits on success, rolls back on failure
4. Session is closed when the request ends
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import Settings, get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# pool_size / max_overflow cap concurrent connections; pool_pre_ping
# discards connections the server has already closed.

def build_engine(settings: Settings) -> Engine:
    """
    Create the engine for the configured database URL.

    SQLite (used by the test-suite and for local experiments) runs on a
    SingletonThreadPool/StaticPool and rejects the pool sizing arguments,
    so they are only passed for server databases.
    """
    if settings.is_sqlite:
        return create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
            echo=settings.debug,
        )

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


engine = build_engine(settings)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

        class Book(Base):
            __tablename__ = "books"
            ...
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it,
    even when the route raised.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables that don't exist yet.

    Called from the application lifespan on startup. There is no migration
    history: changing a column on an existing table needs manual DDL.
    """
    # Import models so they are registered on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only for development and tests.
    """
    Base.metadata.drop_all(bind=engine)
