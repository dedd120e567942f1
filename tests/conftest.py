"""Shared fixtures for tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from bookshelf.config import AppConfig
from bookshelf.library.collection import Library
from bookshelf.library.models import Book


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for name in (
        "BOOKSHELF_SEED_SAMPLE",
        "BOOKSHELF_DEFAULT_SORT",
        "BOOKSHELF_DEFAULT_FILTER",
        "BOOKSHELF_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def library() -> Library:
    return Library()


@pytest.fixture
def sample() -> Library:
    return Library.make_sample()


@pytest.fixture
def mixed_books() -> list[Book]:
    return [
        Book(title="A", author="Author A"),
        Book(title="B", author="Author B", is_read=True),
        Book(title="C", author="Author C"),
        Book(title="D", author="Author D", is_read=True),
    ]


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        data_dir=tmp_path / "data",
        config_dir=tmp_path / "config",
    )
