"""
Book Service

Use-case layer between the router and the repository. Each operation
forwards to the repository and returns its result unchanged; field
validation has already happened on the request schema.
"""

from collections.abc import Sequence

from app.models import Book
from app.repositories.book import BookRepository
from app.schemas.book import BookRequest


class BookService:
    """Book use cases."""

    def __init__(self, repo: BookRepository) -> None:
        self.repo = repo

    def list_books(self) -> Sequence[Book]:
        return self.repo.list_books()

    def create_book(self, data: BookRequest) -> Book:
        return self.repo.create_book(data)

    def get_book(self, book_id: int) -> Book:
        return self.repo.get_book(book_id)

    def update_book(self, book_id: int, data: BookRequest) -> Book:
        return self.repo.update_book(book_id, data)

    def delete_book(self, book_id: int) -> None:
        self.repo.delete_book(book_id)
