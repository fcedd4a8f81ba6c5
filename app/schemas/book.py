"""
Book Pydantic Schemas

- BookRequest: body of POST /books and PUT /books/{id}
- BookResponse: one persisted record as returned to clients

The length bounds here are the only field validation in the request path;
a body that violates them never reaches the service layer.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.book import (
    AUTHOR_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)


class BookRequest(BaseModel):
    """
    Candidate values for a create or an update.

    Unknown keys (including id, created_at, updated_at) are ignored: the
    identifier comes from the URL and timestamps from the database.

    Example request body:
    {
        "title": "1984",
        "author": "George Orwell",
        "description": "A dystopian novel"
    }
    """

    title: str = Field(
        ...,
        min_length=3,
        max_length=TITLE_MAX_LENGTH,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    author: str = Field(
        ...,
        min_length=3,
        max_length=AUTHOR_MAX_LENGTH,
        description="Author name",
        examples=["George Orwell", "Jane Austen"],
    )

    description: str = Field(
        ...,
        min_length=1,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Book description or summary",
        examples=["A dystopian novel"],
    )

    @field_validator("title", "author", "description")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Reject values made only of whitespace."""
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v


class BookResponse(BaseModel):
    """
    Schema for a book in API responses.

    from_attributes=True lets us build it straight from the ORM object:
        BookResponse.model_validate(book)
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    description: str
    created_at: datetime
    updated_at: datetime
