"""
Error taxonomy for the Book Catalog API.

The repository raises these; the exception handlers in app.main translate
them into enveloped HTTP responses:

- BookNotFoundError -> 404
- RepositoryError   -> 500
"""


class BookAPIError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookNotFoundError(BookAPIError):
    """The requested book identifier does not exist in the store."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with id {book_id} not found")
        self.book_id = book_id


class RepositoryError(BookAPIError):
    """
    Any store failure other than a missing record.

    The underlying exception is kept as __cause__; its text is the message.
    """
    pass
