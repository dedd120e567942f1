"""Configuration management via .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from bookshelf.library.models import FilterOption, SortCriteria


def _xdg_data_home() -> Path:
    return Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def _xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    # Paths
    data_dir: Path = field(default_factory=lambda: _xdg_data_home() / "bookshelf")
    config_dir: Path = field(default_factory=lambda: _xdg_config_home() / "bookshelf")

    # Library
    seed_sample: bool = True
    default_sort: SortCriteria = SortCriteria.TITLE
    default_filter: FilterOption = FilterOption.ALL

    log_level: str = "INFO"
    log_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.log_path = self.data_dir / "bookshelf.log"
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.config_dir.mkdir(parents=True, exist_ok=True)


def load_config(env_path: Optional[Path] = None) -> AppConfig:
    """Load config from .env file. Searches CWD then config dir."""
    search_paths = [
        env_path,
        Path.cwd() / ".env",
        _xdg_config_home() / "bookshelf" / ".env",
        Path.home() / ".env",
    ]
    for p in search_paths:
        if p and p.exists():
            load_dotenv(p)
            break

    defaults = AppConfig()

    sort_value = os.getenv("BOOKSHELF_DEFAULT_SORT", defaults.default_sort.value)
    try:
        default_sort = SortCriteria(sort_value.strip().lower())
    except ValueError:
        default_sort = defaults.default_sort

    filter_value = os.getenv("BOOKSHELF_DEFAULT_FILTER", defaults.default_filter.value)
    try:
        default_filter = FilterOption(filter_value.strip().lower())
    except ValueError:
        default_filter = defaults.default_filter

    return AppConfig(
        seed_sample=_env_bool("BOOKSHELF_SEED_SAMPLE", defaults.seed_sample),
        default_sort=default_sort,
        default_filter=default_filter,
        log_level=os.getenv("BOOKSHELF_LOG_LEVEL", defaults.log_level).upper(),
    )
