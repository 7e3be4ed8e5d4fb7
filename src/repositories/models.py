from sqlmodel import Field, SQLModel, UniqueConstraint
from datetime import datetime, timezone


class BookBase(SQLModel):
    """Base model with shared fields"""

    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    isbn: str = Field(min_length=1, max_length=32)


# Type alias - BookCreate is identical to BookBase
BookCreate = BookBase


class Book(BookBase, table=True):
    """Database table model"""

    __table_args__ = (UniqueConstraint("isbn", name="uix_isbn"),)

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class BookRead(BookBase):
    """Model for repository operations (id is guaranteed to exist)"""

    id: int
    created_at: datetime


class BookUpdate(SQLModel):
    """Fields a client may change on an existing book"""

    title: str = Field(min_length=1)
    author: str = Field(min_length=1)


class BookResponse(SQLModel):
    """Model for API responses (id is guaranteed to exist)"""

    id: int
    title: str
    author: str
    isbn: str


class BookFilter(SQLModel):
    """Probe for example-based searches; unset fields are ignored"""

    title: str | None = None
    author: str | None = None
    isbn: str | None = None
