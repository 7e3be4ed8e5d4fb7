from typing import Protocol
from src.repositories.models import Book, BookRead
from src.repositories.query import Example, Page, PageRequest


class BookRepositoryInterface(Protocol):
    def exists_by_isbn(self, isbn: str) -> bool: ...

    def find_by_id(self, book_id: int) -> BookRead | None: ...

    def find_by_isbn(self, isbn: str) -> BookRead | None: ...

    def save(self, book: Book) -> BookRead:
        """
        Insert the book when it has no id, otherwise overwrite the stored row.

        Raises:
            DuplicateIsbnError: If another stored book already uses the isbn.
        """
        ...

    def delete(self, book: Book) -> None: ...

    def find_all(self, example: Example, page_request: PageRequest) -> Page[BookRead]:
        """Return the page of books matching the example, ordered by id."""
        ...
