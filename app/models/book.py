"""
Book Model

The single table of the Book Catalog API.

Column lengths mirror the request-schema bounds in app.schemas.book, so a
value that passed validation always fits its column.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# Identifiers are signed 64-bit integers (BIGINT)
BOOK_ID_MIN = -(2**63)
BOOK_ID_MAX = 2**63 - 1

TITLE_MAX_LENGTH = 100
AUTHOR_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


class Book(Base):
    """
    Book model representing one catalog record.

    Table: books

    Fields:
    - title: Book title (3-100 characters)
    - author: Author name (3-100 characters)
    - description: Book summary (1-1000 characters)
    - created_at / updated_at: assigned by the database

    Example:
        book = Book(
            title="1984",
            author="George Orwell",
            description="A dystopian novel",
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # SQLite only autoincrements a column declared exactly INTEGER
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(AUTHOR_MAX_LENGTH),
        nullable=False,
        comment="Author name"
    )

    description: Mapped[str] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH),
        nullable=False,
        comment="Book description or summary"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Both defaults come from the same INSERT, so a fresh row has
    # created_at == updated_at.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
