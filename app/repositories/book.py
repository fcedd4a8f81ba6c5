"""
Book Repository

Translates the five CRUD operations into SQLAlchemy statements.

Each method runs one unit of work against the request's session and
commits it. Missing rows raise BookNotFoundError; every other
SQLAlchemyError is rolled back and re-raised as RepositoryError.
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import BookNotFoundError, RepositoryError
from app.models import Book
from app.schemas.book import BookRequest

logger = logging.getLogger(__name__)


class BookRepository(Protocol):
    """Data access operations the service layer depends on."""

    def list_books(self) -> Sequence[Book]: ...

    def create_book(self, data: BookRequest) -> Book: ...

    def get_book(self, book_id: int) -> Book: ...

    def update_book(self, book_id: int, data: BookRequest) -> Book: ...

    def delete_book(self, book_id: int) -> None: ...


class SQLAlchemyBookRepository:
    """BookRepository backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        """Roll back and wrap any database failure raised inside the block."""
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Database error while trying to {action}: {exc}")
            raise RepositoryError(str(exc)) from exc

    def _get_or_raise(self, book_id: int) -> Book:
        stmt = select(Book).where(Book.id == book_id)
        book = self.db.execute(stmt).scalar_one_or_none()

        if book is None:
            logger.info(f"Book {book_id} not found")
            raise BookNotFoundError(book_id)

        return book

    def list_books(self) -> Sequence[Book]:
        """Return every book, oldest identifier first."""
        with self._store_errors("list books"):
            stmt = select(Book).order_by(Book.id)
            return self.db.execute(stmt).scalars().all()

    def create_book(self, data: BookRequest) -> Book:
        """
        Insert a new book.

        Identifier and both timestamps are assigned by the database; the
        row is re-read after commit so the caller sees the stored values.
        """
        book = Book(
            title=data.title,
            author=data.author,
            description=data.description,
        )

        with self._store_errors("create book"):
            self.db.add(book)
            self.db.commit()
            self.db.refresh(book)

        logger.debug(f"Created {book!r}")
        return book

    def get_book(self, book_id: int) -> Book:
        with self._store_errors(f"get book {book_id}"):
            return self._get_or_raise(book_id)

    def update_book(self, book_id: int, data: BookRequest) -> Book:
        """
        Replace the mutable fields of an existing book.

        id and created_at are never touched. updated_at is assigned the
        database clock explicitly so it moves even when the submitted values
        equal the stored ones (no UPDATE would be emitted otherwise).
        """
        with self._store_errors(f"update book {book_id}"):
            book = self._get_or_raise(book_id)

            book.title = data.title
            book.author = data.author
            book.description = data.description
            book.updated_at = func.now()

            self.db.commit()
            self.db.refresh(book)

        logger.debug(f"Updated {book!r}")
        return book

    def delete_book(self, book_id: int) -> None:
        with self._store_errors(f"delete book {book_id}"):
            book = self._get_or_raise(book_id)
            self.db.delete(book)
            self.db.commit()

        logger.debug(f"Deleted book {book_id}")
