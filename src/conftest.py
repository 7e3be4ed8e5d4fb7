"""
Database fixtures shared by repository tests.
"""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import src.repositories.models  # noqa: F401


@pytest.fixture(name="session")
def session_fixture():
    """Session on a throwaway SQLite catalogue holding the book table."""
    # StaticPool keeps the single in-memory connection alive across checkouts
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()
