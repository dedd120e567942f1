"""Bookshelf - terminal book collection manager."""

from __future__ import annotations

import logging

from textual.app import App

from bookshelf.config import AppConfig, load_config
from bookshelf.library.collection import Library
from bookshelf.ui.screens.library_screen import LibraryScreen
from bookshelf.ui.themes import APP_CSS

log = logging.getLogger(__name__)


def build_library(config: AppConfig) -> Library:
    """Create the session's library, seeded with sample books if configured."""
    library = Library.make_sample() if config.seed_sample else Library()
    log.info("Library ready with %d books", library.count)
    return library


class BookshelfApp(App):
    """Browse, search and edit a personal collection of books."""

    TITLE = "Bookshelf"
    CSS = APP_CSS

    def __init__(
        self, config: AppConfig | None = None, library: Library | None = None
    ) -> None:
        super().__init__()
        self.config = config or load_config()
        self.library = library if library is not None else build_library(self.config)

    def on_mount(self) -> None:
        self.push_screen(LibraryScreen())


def _setup_logging(config: AppConfig) -> None:
    handler = logging.FileHandler(config.log_path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    level = logging.getLevelName(config.log_level)
    root = logging.getLogger("bookshelf")
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    root.addHandler(handler)


def main() -> None:
    config = load_config()
    _setup_logging(config)

    app = BookshelfApp(config=config)
    app.run()


if __name__ == "__main__":
    main()
