"""
SQLAlchemy Models Package

Import all models here to:
1. Make them available as: from app.models import Book
2. Register them on Base.metadata before create_tables() runs
"""

from app.models.book import Book

__all__ = [
    "Book",
]
