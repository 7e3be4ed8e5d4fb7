"""
Shared pytest fixtures for repository tests.
"""

import pytest
from sqlmodel import Session
from .book_repository import BookRepository


@pytest.fixture(name="book_repo")
def book_repo_fixture(session: Session) -> BookRepository:
    """Create a BookRepository instance with an in-memory database session."""
    return BookRepository(session)
