"""
Services Package

Logic that sits between HTTP handling (routers) and data access
(repositories):

- books.py: Book use cases, delegating to the repository
- rate_limiter.py: Per-client rate limiting with slowapi
"""

from app.services.books import BookService

__all__ = [
    "BookService",
]
