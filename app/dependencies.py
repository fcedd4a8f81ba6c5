"""
FastAPI Dependencies Module

Explicit wiring of the request-scoped object graph:

    get_db() -> Session -> SQLAlchemyBookRepository -> BookService

Each request gets its own session, repository and service; nothing is
shared between requests except the engine's connection pool. Tests swap
any link of the chain with app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.book import BOOK_ID_MAX, BOOK_ID_MIN
from app.repositories.book import BookRepository, SQLAlchemyBookRepository
from app.services.books import BookService

# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
# you can write:
#   def list_books(db: DbSession):
DbSession = Annotated[Session, Depends(get_db)]

# Path identifier: any signed 64-bit integer. Values outside that range
# fail validation (400 "Invalid book ID") instead of reaching the driver.
BookId = Annotated[
    int,
    Path(
        ge=BOOK_ID_MIN,
        le=BOOK_ID_MAX,
        description="Book ID",
        examples=[1],
    ),
]


def get_book_repository(db: DbSession) -> BookRepository:
    """Repository bound to the request's session."""
    return SQLAlchemyBookRepository(db)


def get_book_service(
    repo: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookService:
    """Service bound to the request's repository."""
    return BookService(repo)


BookServiceDep = Annotated[BookService, Depends(get_book_service)]
