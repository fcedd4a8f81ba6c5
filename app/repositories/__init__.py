"""
Repositories Package

Data access layer. Each repository encapsulates the SQL for one entity and
returns ORM objects to the service layer.
"""

from app.repositories.book import BookRepository, SQLAlchemyBookRepository

__all__ = [
    "BookRepository",
    "SQLAlchemyBookRepository",
]
