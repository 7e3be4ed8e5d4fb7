"""
Pagination and query-by-example types shared by repositories and services.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field
from sqlmodel import SQLModel

T = TypeVar("T")


class StringMatcher(str, Enum):
    EXACT = "exact"
    CONTAINING = "containing"


@dataclass(frozen=True)
class ExampleMatcher:
    """How the non-null fields of a probe are compared against stored values."""

    ignore_case: bool = False
    string_matcher: StringMatcher = StringMatcher.EXACT

    def matches_value(self, expected: str, actual: str) -> bool:
        if self.ignore_case:
            expected, actual = expected.lower(), actual.lower()
        if self.string_matcher == StringMatcher.CONTAINING:
            return expected in actual
        return expected == actual


@dataclass(frozen=True)
class Example:
    """
    A probe model together with the matcher used to compare it.

    Only fields set to a non-None value on the probe take part in matching,
    so an empty probe matches every record.
    """

    probe: SQLModel
    matcher: ExampleMatcher = field(default_factory=ExampleMatcher)

    def criteria(self) -> dict[str, str]:
        """Return the probe fields that take part in matching."""
        return self.probe.model_dump(exclude_none=True)

    def matches(self, candidate: SQLModel) -> bool:
        """Evaluate the example against an in-memory object."""
        for name, expected in self.criteria().items():
            actual = getattr(candidate, name, None)
            if actual is None or not self.matcher.matches_value(expected, actual):
                return False
        return True


class PageRequest(BaseModel):
    """Zero-based page number and page size"""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """A slice of a larger result set plus the metadata describing it"""

    content: list[T]
    total_elements: int = Field(ge=0)
    page_number: int = Field(ge=0)
    page_size: int = Field(ge=1)

    @classmethod
    def of(cls, content: list[T], page_request: PageRequest, total: int) -> "Page[T]":
        return cls(
            content=content,
            total_elements=total,
            page_number=page_request.page,
            page_size=page_request.size,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_size)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_first(self) -> bool:
        return self.page_number == 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_last(self) -> bool:
        return self.page_number + 1 >= self.total_pages
