"""
Books Router

CRUD endpoints for books. Handlers only translate between HTTP and the
service layer; outcomes map to statuses as follows:

- success                           -> 200
- non-integer id, bad or invalid body -> 400 (RequestValidationError handler)
- BookNotFoundError                 -> 404 (exception handler in app.main)
- anything else                     -> 500 (exception handler in app.main)

Every response body is an APIResponse envelope.
"""

from fastapi import APIRouter, Request

from app.config import get_settings
from app.dependencies import BookId, BookServiceDep
from app.schemas import APIResponse, BookRequest, BookResponse
from app.schemas.response import ok, ok_with_message
from app.services.rate_limiter import limiter

settings = get_settings()

BOOK_DELETED_MESSAGE = "Book deleted successfully"

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": APIResponse[None], "description": "Malformed request"},
        500: {"model": APIResponse[None], "description": "Unexpected failure"},
    },
)

_not_found = {404: {"model": APIResponse[None], "description": "Book not found"}}


@router.get(
    "",
    response_model=APIResponse[list[BookResponse]],
    summary="List all books",
    description="Get every book in identifier order.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(
    request: Request,
    service: BookServiceDep,
) -> APIResponse[list[BookResponse]]:
    books = service.list_books()
    return ok([BookResponse.model_validate(book) for book in books])


@router.get(
    "/{book_id}",
    response_model=APIResponse[BookResponse],
    responses=_not_found,
    summary="Get a book by ID",
    description="Retrieve a single book.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    book_id: BookId,
    service: BookServiceDep,
) -> APIResponse[BookResponse]:
    """
    Get a single book by its ID.

    Raises:
        BookNotFoundError: 404 if the book does not exist
    """
    book = service.get_book(book_id)
    return ok(BookResponse.model_validate(book))


@router.post(
    "",
    response_model=APIResponse[BookResponse],
    summary="Create a new book",
    description="Create a book from title, author and description.",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookRequest,
    service: BookServiceDep,
) -> APIResponse[BookResponse]:
    """
    Create a new book.

    The store assigns the id and both timestamps, so the returned record
    has created_at == updated_at.
    """
    book = service.create_book(book_data)
    return ok(BookResponse.model_validate(book))


@router.put(
    "/{book_id}",
    response_model=APIResponse[BookResponse],
    responses=_not_found,
    summary="Update a book",
    description="Replace the title, author and description of an existing book.",
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: BookId,
    book_data: BookRequest,
    service: BookServiceDep,
) -> APIResponse[BookResponse]:
    """
    Update an existing book.

    The identifier comes from the path; id and created_at are preserved,
    updated_at is refreshed.

    Raises:
        BookNotFoundError: 404 if the book does not exist
    """
    book = service.update_book(book_id, book_data)
    return ok(BookResponse.model_validate(book))


@router.delete(
    "/{book_id}",
    response_model=APIResponse[None],
    responses=_not_found,
    summary="Delete a book",
    description="Permanently delete a book.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    book_id: BookId,
    service: BookServiceDep,
) -> APIResponse[None]:
    """
    Delete a book.

    Deleting the same id twice answers 404 the second time.
    """
    service.delete_book(book_id)
    return ok_with_message(BOOK_DELETED_MESSAGE)
