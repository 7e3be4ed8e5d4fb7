"""Helper functions for building API response models."""

from src.repositories.models import BookRead, BookResponse
from src.repositories.query import Page


def build_book_response(book: BookRead) -> BookResponse:
    """Build a BookResponse from a BookRead model."""
    return BookResponse(
        id=book.id,
        title=book.title,
        author=book.author,
        isbn=book.isbn,
    )


def build_book_page_response(page: Page[BookRead]) -> Page[BookResponse]:
    """Convert a page of repository books into a page of API responses, keeping its metadata."""
    return Page[BookResponse](
        content=[build_book_response(book) for book in page.content],
        total_elements=page.total_elements,
        page_number=page.page_number,
        page_size=page.page_size,
    )
