from typing import Generator
from sqlmodel import create_engine, Session
from src.config import settings

# Catalogue schema is owned by the Alembic revisions under migrations/
engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    pool_pre_ping=True,
)


def get_session() -> Generator[Session, None, None]:
    """Yield a catalogue session that is closed when the request finishes."""
    with Session(engine) as session:
        yield session
