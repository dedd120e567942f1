"""Data models for the book library."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

MIN_RATING = 1
MAX_RATING = 5


class InvalidRatingError(ValueError):
    """Raised when a rating is not an integer between 1 and 5."""


def _new_id() -> str:
    return uuid.uuid4().hex


def _check_rating(rating: object) -> None:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRatingError(f"Rating must be an integer, got {rating!r}")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidRatingError(
            f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}"
        )


@dataclass
class Book:
    title: str
    author: str
    is_read: bool = False
    rating: Optional[int] = None  # 1 - 5, None means unrated
    id: str = field(default_factory=_new_id)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Book id cannot be reassigned")
        if name == "rating" and value is not None:
            _check_rating(value)
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        title: str,
        author: str,
        is_read: bool = False,
        rating: Optional[int] = None,
    ) -> Book:
        """Build a new book from user input, trimming title and author."""
        title = title.strip()
        author = author.strip()
        if not title:
            raise ValueError("Title must not be empty")
        if not author:
            raise ValueError("Author must not be empty")
        return cls(title=title, author=author, is_read=is_read, rating=rating)

    # ── Copies ─────────────────────────────────────────────

    def marking_as_read(self) -> Book:
        return replace(self, is_read=True)

    def with_rating(self, new_rating: int) -> Book:
        _check_rating(new_rating)
        return replace(self, rating=new_rating)

    # ── In-place ───────────────────────────────────────────

    def mark_as_read(self) -> None:
        self.is_read = True

    def rate(self, new_rating: int) -> None:
        _check_rating(new_rating)
        self.rating = new_rating

    def clear_rating(self) -> None:
        self.rating = None

    # ── Queries ────────────────────────────────────────────

    @property
    def has_rating(self) -> bool:
        return self.rating is not None

    @property
    def stars(self) -> str:
        filled = self.rating or 0
        return "★" * filled + "☆" * (MAX_RATING - filled)

    def matches(self, search_query: str) -> bool:
        """Case-insensitive substring match against title or author."""
        if not search_query:
            return True
        q = search_query.lower()
        return q in self.title.lower() or q in self.author.lower()


class SortCriteria(Enum):
    TITLE = "title"
    AUTHOR = "author"
    READ_STATUS = "read_status"

    @property
    def label(self) -> str:
        return {
            SortCriteria.TITLE: "Title",
            SortCriteria.AUTHOR: "Author",
            SortCriteria.READ_STATUS: "Read first",
        }[self]


class FilterOption(Enum):
    ALL = "all"
    READ = "read"
    UNREAD = "unread"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def accepts(self, book: Book) -> bool:
        if self is FilterOption.READ:
            return book.is_read
        if self is FilterOption.UNREAD:
            return not book.is_read
        return True
