"""In-memory book collection with search, filtering, sorting and change notification."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Callable, Iterable, Iterator, Optional

from .models import Book, FilterOption, SortCriteria

log = logging.getLogger(__name__)

Observer = Callable[[], None]

SAMPLE_BOOKS = [
    ("1984", "George Orwell", True, 5),
    ("To Kill a Mockingbird", "Harper Lee", True, 5),
    ("The Great Gatsby", "F. Scott Fitzgerald", False, None),
    ("Pride and Prejudice", "Jane Austen", True, 4),
    ("The Catcher in the Rye", "J.D. Salinger", False, None),
]


class DuplicateBookError(ValueError):
    """Raised when adding a book whose id is already in the library."""


class Library:
    """Ordered collection of books, keyed by book id.

    Stored books are private: books go in and come out as copies, so the only
    way to change stored state is through the mutating methods. Every change
    is announced to subscribers after it has been applied.
    """

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books: list[Book] = []
        self._lock = threading.RLock()
        self._observers: list[Observer] = []
        initial = list(books)
        if initial:
            self._check_new(initial)
            self._books.extend(copy.copy(b) for b in initial)

    @classmethod
    def make_sample(cls) -> Library:
        """Create a library with a handful of well-known books."""
        return cls(
            Book(title=title, author=author, is_read=is_read, rating=rating)
            for title, author, is_read, rating in SAMPLE_BOOKS
        )

    # ── Observers ──────────────────────────────────────────

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Register a callback fired after each change. Returns an unsubscribe function."""
        with self._lock:
            self._observers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._observers:
                    self._observers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        with self._lock:
            observers = list(self._observers)
        for callback in observers:
            callback()

    # ── Adding ─────────────────────────────────────────────

    def _check_new(self, books: list[Book]) -> None:
        seen = {b.id for b in self._books}
        for book in books:
            if book.id in seen:
                log.warning("Rejected duplicate book id %s (%s)", book.id, book.title)
                raise DuplicateBookError(
                    f"Book with id {book.id} is already in the library"
                )
            seen.add(book.id)

    def add(self, book: Book) -> None:
        with self._lock:
            self._check_new([book])
            self._books.append(copy.copy(book))
        log.debug("Added book %s (%s)", book.id, book.title)
        self._notify()

    def add_all(self, books: Iterable[Book]) -> None:
        """Append books in order. Nothing is added if any id collides."""
        new_books = list(books)
        if not new_books:
            return
        with self._lock:
            self._check_new(new_books)
            self._books.extend(copy.copy(b) for b in new_books)
        log.debug("Added %d books", len(new_books))
        self._notify()

    # ── Removing ───────────────────────────────────────────

    def remove_at(self, index: int) -> Book:
        with self._lock:
            count = len(self._books)
            if not 0 <= index < count:
                raise IndexError(
                    f"Book index {index} out of range for library of {count}"
                )
            book = self._books.pop(index)
        log.debug("Removed book %s at index %d", book.id, index)
        self._notify()
        return book

    def remove(self, book: Book) -> None:
        with self._lock:
            before = len(self._books)
            self._books = [b for b in self._books if b.id != book.id]
            removed = before - len(self._books)
        if not removed:
            log.debug("Remove ignored, book %s not in library", book.id)
            return
        log.debug("Removed book %s", book.id)
        self._notify()

    def remove_all(self) -> None:
        with self._lock:
            if not self._books:
                return
            self._books.clear()
        log.debug("Removed all books")
        self._notify()

    # ── Updating ───────────────────────────────────────────

    def update(self, book: Book) -> None:
        """Replace the stored book that has the same id. Unknown ids are ignored."""
        with self._lock:
            index = self._index_of(book.id)
            if index is None:
                log.debug("Update ignored, book %s not in library", book.id)
                return
            self._books[index] = copy.copy(book)
        log.debug("Updated book %s", book.id)
        self._notify()

    def _index_of(self, book_id: str) -> Optional[int]:
        for i, b in enumerate(self._books):
            if b.id == book_id:
                return i
        return None

    # ── Querying ───────────────────────────────────────────

    @property
    def books(self) -> list[Book]:
        with self._lock:
            return [copy.copy(b) for b in self._books]

    def get(self, book_id: str) -> Optional[Book]:
        with self._lock:
            index = self._index_of(book_id)
            return copy.copy(self._books[index]) if index is not None else None

    def books_matching(self, search_query: str) -> list[Book]:
        if not search_query:
            return self.books
        return [b for b in self.books if b.matches(search_query)]

    def read_books(self) -> list[Book]:
        return [b for b in self.books if b.is_read]

    def unread_books(self) -> list[Book]:
        return [b for b in self.books if not b.is_read]

    def books_sorted_by(self, criteria: SortCriteria) -> list[Book]:
        books = self.books
        if criteria is SortCriteria.TITLE:
            return sorted(books, key=lambda b: b.title)
        if criteria is SortCriteria.AUTHOR:
            return sorted(books, key=lambda b: b.author)
        if criteria is SortCriteria.READ_STATUS:
            # sorted() is stable, so insertion order holds within each group
            return sorted(books, key=lambda b: not b.is_read)
        raise ValueError(f"Unknown sort criteria: {criteria!r}")

    def filtered(self, option: FilterOption, search_query: str = "") -> list[Book]:
        """Books matching the search query, narrowed by read status."""
        return [b for b in self.books_matching(search_query) if option.accepts(b)]

    # ── Statistics ─────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._books)

    @property
    def read_count(self) -> int:
        with self._lock:
            return sum(1 for b in self._books if b.is_read)

    @property
    def reading_progress(self) -> float:
        """Fraction of books read, 0.0 for an empty library."""
        with self._lock:
            if not self._books:
                return 0.0
            return self.read_count / len(self._books)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def __contains__(self, book: object) -> bool:
        if not isinstance(book, Book):
            return False
        with self._lock:
            return self._index_of(book.id) is not None
