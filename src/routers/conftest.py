"""
Shared pytest fixtures for router tests.

Each fixture returns a setup function that creates fresh stubs and installs
them as dependency overrides, with automatic cleanup.
"""

from typing import Generator, Callable
from unittest.mock import MagicMock
import pytest
from sqlalchemy.exc import OperationalError

from src.main import app
from src.database import get_session
from src.dependencies import get_book_repository
from src.test_utils import StubBookRepository

# Type aliases for fixtures
BookDepsSetup = Callable[..., StubBookRepository]
SessionDepsSetup = Callable[..., MagicMock]


@pytest.fixture
def setup_book_deps() -> Generator[BookDepsSetup, None, None]:
    """
    Setup the book repository dependency.

    Usage:
        def test_something(setup_book_deps):
            book_repo = setup_book_deps()
            # or with config:
            book_repo = setup_book_deps(include_sample_book=True)
            # Cleanup is automatic!
    """

    def _setup(include_sample_book: bool = False) -> StubBookRepository:
        book_repo = StubBookRepository(include_sample_book=include_sample_book)
        app.dependency_overrides[get_book_repository] = lambda: book_repo
        return book_repo

    yield _setup
    app.dependency_overrides.clear()


@pytest.fixture
def setup_session_deps() -> Generator[SessionDepsSetup, None, None]:
    """Replace the database session with a mock, optionally failing every query."""

    def _setup(database_down: bool = False) -> MagicMock:
        session = MagicMock()
        if database_down:
            session.exec.side_effect = OperationalError(
                "SELECT 1", {}, Exception("connection refused")
            )
        app.dependency_overrides[get_session] = lambda: session
        return session

    yield _setup
    app.dependency_overrides.clear()
