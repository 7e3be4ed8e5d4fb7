"""
Errors raised by the book service layer.
"""


class BookServiceError(Exception):
    """Base exception class for all book service errors"""

    pass


class DuplicateIsbnError(BookServiceError):
    """Raised when a book is saved with an isbn that is already registered."""

    def __init__(self, isbn: str, message: str = "Isbn already registered"):
        super().__init__(message)
        self.isbn = isbn


class InvalidBookError(BookServiceError, ValueError):
    """Raised when an operation needs a persisted book but got one without an id."""

    pass
