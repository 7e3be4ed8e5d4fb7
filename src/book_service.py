"""
Book catalogue service.

Sequences the catalogue's validation rules around a BookRepositoryInterface:
isbns are unique, and updates or deletions need a book that has been persisted.
"""

import logging
from src.exceptions import DuplicateIsbnError, InvalidBookError
from src.repositories.interfaces import BookRepositoryInterface
from src.repositories.models import Book, BookFilter, BookRead
from src.repositories.query import Example, ExampleMatcher, Page, PageRequest

logger = logging.getLogger(__name__)


class BookService:
    def __init__(self, repository: BookRepositoryInterface):
        self.repository = repository

    def save(self, book: Book) -> BookRead:
        """
        Persist a new book.

        Raises:
            DuplicateIsbnError: If a book with the same isbn is already registered.
        """
        if self.repository.exists_by_isbn(book.isbn):
            logger.warning(f"Rejected book with already registered isbn {book.isbn}")
            raise DuplicateIsbnError(book.isbn)

        saved = self.repository.save(book)
        logger.info(f"Saved book {saved.id} with isbn {saved.isbn}")
        return saved

    def get_by_id(self, book_id: int) -> BookRead | None:
        return self.repository.find_by_id(book_id)

    def get_by_isbn(self, isbn: str) -> BookRead | None:
        return self.repository.find_by_isbn(isbn)

    def delete(self, book: Book) -> None:
        """
        Remove a persisted book.

        Raises:
            InvalidBookError: If the book has no id.
        """
        if book.id is None:
            logger.warning("Rejected delete of a book without an id")
            raise InvalidBookError("Book id cannot be null")

        self.repository.delete(book)
        logger.info(f"Deleted book {book.id}")

    def update(self, book: Book) -> BookRead:
        """
        Persist the current fields of an existing book.

        Raises:
            InvalidBookError: If the book has no id.
        """
        if book.id is None:
            logger.warning("Rejected update of a book without an id")
            raise InvalidBookError("Book id cannot be null")

        updated = self.repository.save(book)
        logger.info(f"Updated book {updated.id}")
        return updated

    def find(
        self,
        book_filter: BookFilter,
        page_request: PageRequest,
        matcher: ExampleMatcher | None = None,
    ) -> Page[BookRead]:
        """
        Search books by example.

        Unset filter fields are ignored. Without a matcher the remaining fields
        are compared for equality. The repository's page is returned as is.
        """
        example = Example(probe=book_filter, matcher=matcher or ExampleMatcher())
        return self.repository.find_all(example, page_request)
