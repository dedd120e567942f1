from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Static,
)

from bookshelf.library.collection import DuplicateBookError
from bookshelf.library.models import Book, FilterOption, SortCriteria
from bookshelf.ui.screens.book_screen import AddBookScreen, BookDetailScreen

if TYPE_CHECKING:
    from bookshelf.app import BookshelfApp

log = logging.getLogger(__name__)

SORT_OPTIONS = list(SortCriteria)
FILTER_OPTIONS = list(FilterOption)


class RemoveBookScreen(ModalScreen[bool]):
    """Asks before a book is taken off the shelf."""

    BINDINGS = [
        Binding("escape", "keep", "Keep"),
        Binding("y", "remove", "Remove"),
        Binding("n", "keep", "Keep"),
    ]

    DEFAULT_CSS = """
    RemoveBookScreen {
        align: center middle;
    }
    #remove-dialog {
        width: 64;
        height: auto;
        background: $surface;
        border: round $error;
        padding: 1 2;
    }
    #remove-question {
        width: 100%;
        text-align: center;
    }
    #remove-detail {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }
    #remove-buttons {
        align: center middle;
        height: 3;
    }
    #remove-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, book: Book) -> None:
        super().__init__()
        self._book = book

    def compose(self) -> ComposeResult:
        with Vertical(id="remove-dialog"):
            yield Label(f'Remove "{self._book.title}"?', id="remove-question")
            yield Label(f"by {self._book.author}", id="remove-detail")
            with Horizontal(id="remove-buttons"):
                yield Button("Remove [y]", variant="error", id="remove-yes")
                yield Button("Keep [n]", variant="default", id="remove-no")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "remove-yes")

    def action_remove(self) -> None:
        self.dismiss(True)

    def action_keep(self) -> None:
        self.dismiss(False)


def empty_state_message(option: FilterOption, search_query: str) -> str:
    if search_query:
        return f"No results for '{search_query}'"
    if option is FilterOption.READ:
        return "You haven't read any books yet"
    if option is FilterOption.UNREAD:
        return "You've read every book!"
    return "Press A to add your first book"


class LibraryScreen(Screen):
    BINDINGS = [
        Binding("A", "add_book", "Add", priority=True),
        Binding("D", "delete_book", "Delete", priority=True),
        Binding("r", "toggle_read", "Read"),
        Binding("s", "cycle_sort", "Sort"),
        Binding("f", "cycle_filter", "Filter"),
        Binding("S", "toggle_search", "Search"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._sort_index = 0
        self._filter_index = 0
        self._searching = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def bs(self) -> BookshelfApp:
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="library-header")
        with Horizontal(id="search-bar"):
            yield Input(
                placeholder="Search by title or author... (Esc to close)",
                id="search-input",
            )
        yield DataTable(id="book-table")
        yield Static("", id="empty-state")
        yield Footer()

    def on_mount(self) -> None:
        config = self.bs.config
        self._sort_index = SORT_OPTIONS.index(config.default_sort)
        self._filter_index = FILTER_OPTIONS.index(config.default_filter)

        table = self.query_one("#book-table", DataTable)
        table.cursor_type = "row"
        table.add_columns("Title", "Author", "Rating", "Read")
        self._unsubscribe = self.bs.library.subscribe(self._on_library_changed)
        self._refresh_books()
        table.focus()

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_library_changed(self) -> None:
        self._refresh_books()

    @property
    def _search_query(self) -> str:
        if not self._searching:
            return ""
        return self.query_one("#search-input", Input).value

    def _refresh_books(self) -> None:
        library = self.bs.library
        sort = SORT_OPTIONS[self._sort_index]
        option = FILTER_OPTIONS[self._filter_index]
        query = self._search_query

        visible = {b.id for b in library.filtered(option, query)}
        books = [b for b in library.books_sorted_by(sort) if b.id in visible]

        table = self.query_one("#book-table", DataTable)
        table.clear()
        for book in books:
            table.add_row(
                book.title,
                book.author,
                book.stars if book.has_rating else "",
                "✓" if book.is_read else "",
                key=book.id,
            )

        empty = self.query_one("#empty-state", Static)
        if books:
            empty.styles.display = "none"
            table.styles.display = "block"
        else:
            empty.update(empty_state_message(option, query))
            empty.styles.display = "block"
            table.styles.display = "none"

        self.query_one("#library-header", Static).update(
            f" Bookshelf  ({library.count} books, {library.read_count} read, "
            f"{library.reading_progress:.0%})  "
            f"Sort: {sort.label}  Filter: {option.label}"
        )

    def _selected_book(self) -> Optional[Book]:
        table = self.query_one("#book-table", DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return self.bs.library.get(str(row_key.value))

    # ── Search ──────────────────────────────────

    def _set_searching(self, active: bool) -> None:
        """Show or hide the search bar. Hiding it also clears the query."""
        self._searching = active
        self.query_one("#search-bar").styles.display = "block" if active else "none"
        search = self.query_one("#search-input", Input)
        search.value = ""
        if active:
            search.focus()
        else:
            self._refresh_books()
            self.query_one("#book-table", DataTable).focus()

    def action_toggle_search(self) -> None:
        self._set_searching(not self._searching)

    @on(Input.Changed, "#search-input")
    def on_search_changed(self, event: Input.Changed) -> None:
        if self._searching:
            self._refresh_books()

    @on(Input.Submitted, "#search-input")
    def on_search_submitted(self, event: Input.Submitted) -> None:
        self.query_one("#book-table", DataTable).focus()

    def on_key(self, event) -> None:
        # Esc closes the search bar before the screen sees it
        if event.key == "escape" and self._searching:
            event.stop()
            event.prevent_default()
            self._set_searching(False)

    # ── Add Book ────────────────────────────────

    def action_add_book(self) -> None:
        self.app.push_screen(AddBookScreen(), callback=self._on_book_added)

    def _on_book_added(self, book: Book | None) -> None:
        if book is None:
            return
        try:
            self.bs.library.add(book)
        except DuplicateBookError as e:
            self.notify(str(e), severity="error")
            return
        self.notify(f"Added: {book.title}")

    # ── Edit Book ───────────────────────────────

    @on(DataTable.RowSelected, "#book-table")
    def on_row_selected(self, event: DataTable.RowSelected) -> None:
        book = self.bs.library.get(str(event.row_key.value))
        if book:
            self.app.push_screen(BookDetailScreen(book), callback=self._on_book_edited)

    def _on_book_edited(self, book: Book | None) -> None:
        if book is not None:
            self.bs.library.update(book)

    def action_toggle_read(self) -> None:
        book = self._selected_book()
        if not book:
            return
        if book.is_read:
            book.is_read = False
        else:
            book.mark_as_read()
        self.bs.library.update(book)

    # ── Delete Book ─────────────────────────────

    def action_delete_book(self) -> None:
        book = self._selected_book()
        if not book:
            return
        self.app.push_screen(
            RemoveBookScreen(book),
            callback=lambda confirmed: self._on_delete_confirmed(confirmed, book),
        )

    def _on_delete_confirmed(self, confirmed: bool | None, book: Book) -> None:
        if not confirmed:
            return
        self.bs.library.remove(book)
        log.info("Removed %s from library", book.title)
        self.notify(f"Removed: {book.title}")

    # ── Sort / Filter / Quit ────────────────────

    def action_cycle_sort(self) -> None:
        self._sort_index = (self._sort_index + 1) % len(SORT_OPTIONS)
        self._refresh_books()

    def action_cycle_filter(self) -> None:
        self._filter_index = (self._filter_index + 1) % len(FILTER_OPTIONS)
        self._refresh_books()

    def action_quit_app(self) -> None:
        self.app.exit()
