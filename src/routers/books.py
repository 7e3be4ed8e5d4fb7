"""
Book catalogue endpoints: register, look up, update, remove and filter books.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from src.book_service import BookService
from src.config import settings
from src.dependencies import get_book_service
from src.exceptions import DuplicateIsbnError
from src.repositories.models import (
    Book,
    BookCreate,
    BookFilter,
    BookRead,
    BookResponse,
    BookUpdate,
)
from src.repositories.query import ExampleMatcher, Page, PageRequest, StringMatcher
from src.routers.response_builders import build_book_page_response, build_book_response
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/books", tags=["books"])

# Listing filters behave like a search box
LISTING_MATCHER = ExampleMatcher(
    ignore_case=True, string_matcher=StringMatcher.CONTAINING
)


def _get_existing_book(service: BookService, book_id: int) -> BookRead:
    book = service.get_by_id(book_id)
    if not book:
        logger.error(f"Error finding a book with an id of {book_id}")
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.post(
    "",
    status_code=201,
    summary="Register a book",
    description="Add a new book to the catalogue. The isbn must not be registered yet.",
    response_description="The registered book with its assigned id",
    response_model=BookResponse,
    responses={
        400: {"description": "Isbn already registered"},
        201: {"description": "Book registered successfully"},
    },
)
async def create_book(
    payload: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    try:
        saved = service.save(Book.model_validate(payload))
    except DuplicateIsbnError as e:
        logger.error(f"Cannot register book with isbn {payload.isbn}: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    return build_book_response(saved)


@router.get(
    "",
    summary="Filter books",
    description="""
    Page through the catalogue.

    `title`, `author` and `isbn` are optional, case-insensitive substring filters.
    Pages are zero-based; `size` is capped by the server's maximum page size.
    """,
    response_description="A page of books with pagination metadata",
    response_model=Page[BookResponse],
)
async def find_books(
    title: str | None = None,
    author: str | None = None,
    isbn: str | None = None,
    page: int = Query(default=0, ge=0),
    size: int = Query(default=settings.default_page_size, ge=1),
    service: BookService = Depends(get_book_service),
) -> Page[BookResponse]:
    book_filter = BookFilter(title=title, author=author, isbn=isbn)
    page_request = PageRequest(page=page, size=min(size, settings.max_page_size))
    result = service.find(book_filter, page_request, matcher=LISTING_MATCHER)
    return build_book_page_response(result)


@router.get(
    "/isbn/{isbn}",
    summary="Get a book by isbn",
    response_model=BookResponse,
    responses={
        404: {"description": "Book not found"},
        200: {"description": "Book retrieved successfully"},
    },
)
async def get_book_by_isbn(
    isbn: str,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    book = service.get_by_isbn(isbn)
    if not book:
        logger.error(f"Error finding a book with an isbn of {isbn}")
        raise HTTPException(status_code=404, detail="Book not found")
    return build_book_response(book)


@router.get(
    "/{book_id}",
    summary="Get a book",
    response_model=BookResponse,
    responses={
        404: {"description": "Book not found"},
        200: {"description": "Book retrieved successfully"},
    },
)
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    return build_book_response(_get_existing_book(service, book_id))


@router.put(
    "/{book_id}",
    summary="Update a book",
    description="Change the title and author of a registered book. The isbn is kept.",
    response_model=BookResponse,
    responses={
        404: {"description": "Book not found"},
        200: {"description": "Book updated successfully"},
    },
)
async def update_book(
    book_id: int,
    payload: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    existing = _get_existing_book(service, book_id)
    book = Book.model_validate(existing.model_dump() | payload.model_dump())
    return build_book_response(service.update(book))


@router.delete(
    "/{book_id}",
    status_code=204,
    summary="Delete a book",
    responses={
        404: {"description": "Book not found"},
        204: {"description": "Book deleted successfully"},
    },
)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Response:
    existing = _get_existing_book(service, book_id)
    service.delete(Book.model_validate(existing.model_dump()))
    return Response(status_code=204)
