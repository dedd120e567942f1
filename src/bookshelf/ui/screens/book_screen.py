from __future__ import annotations

from dataclasses import replace
from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Checkbox, Input, Label, Select

from bookshelf.library.models import MAX_RATING, MIN_RATING, Book

RATING_OPTIONS = [
    ("★" * n, n) for n in range(MIN_RATING, MAX_RATING + 1)
]


class BookFormScreen(ModalScreen[Optional[Book]]):
    """Modal form for the editable fields of a book."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    DEFAULT_CSS = """
    BookFormScreen {
        align: center middle;
    }
    """

    FORM_TITLE = "Book"
    SUBMIT_LABEL = "Save"

    def __init__(self, book: Optional[Book] = None) -> None:
        super().__init__()
        self._book = book

    def compose(self) -> ComposeResult:
        book = self._book
        with Vertical(classes="form-dialog"):
            yield Label(self.FORM_TITLE, classes="form-title")
            with Horizontal(classes="form-row"):
                yield Label("Title")
                yield Input(
                    value=book.title if book else "",
                    placeholder="Title",
                    id="title-input",
                )
            with Horizontal(classes="form-row"):
                yield Label("Author")
                yield Input(
                    value=book.author if book else "",
                    placeholder="Author",
                    id="author-input",
                )
            with Horizontal(classes="form-row"):
                yield Label("Rating")
                yield Select(
                    RATING_OPTIONS,
                    prompt="Unrated",
                    value=book.rating if book and book.has_rating else Select.BLANK,
                    id="rating-select",
                )
            yield Checkbox("Read", value=book.is_read if book else False, id="read-check")
            with Horizontal(classes="form-buttons"):
                yield Button(self.SUBMIT_LABEL, variant="primary", id="form-submit")
                yield Button("Cancel [Esc]", variant="default", id="form-cancel")

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    def _selected_rating(self) -> Optional[int]:
        value = self.query_one("#rating-select", Select).value
        return value if isinstance(value, int) else None

    def _build_book(self) -> Book:
        return Book.create(
            title=self.query_one("#title-input", Input).value,
            author=self.query_one("#author-input", Input).value,
            is_read=self.query_one("#read-check", Checkbox).value,
            rating=self._selected_rating(),
        )

    def _submit(self) -> None:
        try:
            book = self._build_book()
        except ValueError as e:
            self.notify(str(e), severity="error")
            return
        self.dismiss(book)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "form-submit":
            self._submit()
        elif event.button.id == "form-cancel":
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class AddBookScreen(BookFormScreen):
    FORM_TITLE = "Add a book"
    SUBMIT_LABEL = "Add"


class BookDetailScreen(BookFormScreen):
    """Edits a copy of a stored book. Dismisses with the edited copy."""

    FORM_TITLE = "Book details"
    SUBMIT_LABEL = "Done"

    def __init__(self, book: Book) -> None:
        super().__init__(book)

    def _build_book(self) -> Book:
        draft = super()._build_book()
        return replace(draft, id=self._book.id)
