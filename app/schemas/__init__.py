"""
Pydantic Schemas Package

Pydantic models for request/response validation, kept separate from the
SQLAlchemy models so the API shape and the table can evolve independently.

Schema Naming Convention:
- XxxRequest: Body accepted when creating or replacing a record
- XxxResponse: Fields returned in API responses
- APIResponse: The {status, message, data} envelope around every response
"""

from app.schemas.book import BookRequest, BookResponse
from app.schemas.response import APIResponse

__all__ = [
    "APIResponse",
    "BookRequest",
    "BookResponse",
]
