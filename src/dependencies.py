"""
Dependency injection functions for FastAPI endpoints.

Route handlers receive their repository and service instances through these
functions, which tests replace via app.dependency_overrides.
"""

from fastapi import Depends
from sqlmodel import Session
from src.database import get_session
from src.book_service import BookService
from src.repositories.book_repository import BookRepository
from src.repositories.interfaces import BookRepositoryInterface


def get_book_repository(
    session: Session = Depends(get_session),
) -> BookRepositoryInterface:
    """Get an instance of the book repository."""
    return BookRepository(session)


def get_book_service(
    book_repository: BookRepositoryInterface = Depends(get_book_repository),
) -> BookService:
    """Get a book service bound to the request's repository."""
    return BookService(book_repository)
