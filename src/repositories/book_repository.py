import logging
from typing import Any
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, col
from src.exceptions import DuplicateIsbnError
from src.repositories.models import Book, BookRead
from src.repositories.interfaces import BookRepositoryInterface
from src.repositories.query import Example, Page, PageRequest, StringMatcher

logger = logging.getLogger(__name__)


def _example_conditions(example: Example) -> list[Any]:
    conditions: list[Any] = []
    for name, value in example.criteria().items():
        column: Any = col(getattr(Book, name))
        if example.matcher.ignore_case:
            column = func.lower(column)
            value = value.lower()
        if example.matcher.string_matcher == StringMatcher.CONTAINING:
            conditions.append(column.contains(value, autoescape=True))
        else:
            conditions.append(column == value)
    return conditions


class BookRepository(BookRepositoryInterface):
    def __init__(self, session: Session):
        self.session = session

    def exists_by_isbn(self, isbn: str) -> bool:
        statement = select(Book.id).where(Book.isbn == isbn)
        return self.session.exec(statement).first() is not None

    def _isbn_taken_by_other(self, isbn: str | None, book_id: int | None) -> bool:
        if isbn is None:
            return False
        statement = select(Book.id).where(Book.isbn == isbn)
        if book_id is not None:
            statement = statement.where(col(Book.id) != book_id)
        return self.session.exec(statement).first() is not None

    def find_by_id(self, book_id: int) -> BookRead | None:
        book = self.session.get(Book, book_id)
        return BookRead.model_validate(book) if book else None

    def find_by_isbn(self, isbn: str) -> BookRead | None:
        statement = select(Book).where(Book.isbn == isbn)
        book = self.session.exec(statement).first()
        return BookRead.model_validate(book) if book else None

    def save(self, book: Book) -> BookRead:
        if book.id is None:
            db_book = book
            self.session.add(db_book)
        else:
            db_book = self.session.get(Book, book.id) or Book(id=book.id)
            # created_at of the stored row is kept
            db_book.sqlmodel_update(book.model_dump(exclude={"id", "created_at"}))
            self.session.add(db_book)

        isbn, book_id = book.isbn, book.id
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.error(f"Integrity error saving book with isbn {isbn}: {e}")
            if self._isbn_taken_by_other(isbn, book_id):
                raise DuplicateIsbnError(isbn) from e
            raise

        self.session.refresh(db_book)
        return BookRead.model_validate(db_book)

    def delete(self, book: Book) -> None:
        if book.id is None:
            return
        db_book = self.session.get(Book, book.id)
        if not db_book:
            return
        self.session.delete(db_book)
        self.session.commit()

    def find_all(self, example: Example, page_request: PageRequest) -> Page[BookRead]:
        conditions = _example_conditions(example)

        count_statement = select(func.count()).select_from(Book).where(*conditions)
        total = self.session.exec(count_statement).one()

        statement = (
            select(Book)
            .where(*conditions)
            .order_by(col(Book.id))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        books = self.session.exec(statement).all()
        return Page[BookRead].of(
            [BookRead.model_validate(book) for book in books], page_request, total
        )
