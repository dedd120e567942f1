"""Tests for configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from bookshelf.app import _setup_logging, build_library
from bookshelf.config import AppConfig, load_config
from bookshelf.library.models import FilterOption, SortCriteria


class TestAppConfig:
    def test_defaults(self, tmp_path: Path):
        config = AppConfig(data_dir=tmp_path / "data", config_dir=tmp_path / "config")
        assert config.seed_sample is True
        assert config.default_sort is SortCriteria.TITLE
        assert config.default_filter is FilterOption.ALL
        assert config.log_level == "INFO"
        assert config.log_path == tmp_path / "data" / "bookshelf.log"

    def test_dirs_created(self, tmp_path: Path):
        data = tmp_path / "data"
        conf = tmp_path / "config"
        AppConfig(data_dir=data, config_dir=conf)
        assert data.exists()
        assert conf.exists()


class TestLoadConfig:
    def test_load_from_env_file(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "BOOKSHELF_SEED_SAMPLE=false\n"
            "BOOKSHELF_DEFAULT_SORT=read_status\n"
            "BOOKSHELF_DEFAULT_FILTER=Unread\n"
            "BOOKSHELF_LOG_LEVEL=debug\n"
        )
        config = load_config(env_path=env_file)
        assert config.seed_sample is False
        assert config.default_sort is SortCriteria.READ_STATUS
        assert config.default_filter is FilterOption.UNREAD
        assert config.log_level == "DEBUG"

    def test_empty_env_uses_defaults(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("")
        config = load_config(env_path=env_file)
        assert config.seed_sample is True
        assert config.default_sort is SortCriteria.TITLE
        assert config.default_filter is FilterOption.ALL

    def test_unknown_values_fall_back(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "BOOKSHELF_DEFAULT_SORT=isbn\n" "BOOKSHELF_DEFAULT_FILTER=someday\n"
        )
        config = load_config(env_path=env_file)
        assert config.default_sort is SortCriteria.TITLE
        assert config.default_filter is FilterOption.ALL

    def test_data_dir_from_xdg(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("")
        config = load_config(env_path=env_file)
        assert config.data_dir == tmp_path / "xdg-data" / "bookshelf"
        assert config.data_dir.exists()


class TestStartup:
    def test_build_library_sample(self, config: AppConfig):
        assert build_library(config).count == 5

    def test_build_library_empty(self, config: AppConfig):
        config.seed_sample = False
        assert build_library(config).is_empty

    def test_setup_logging_writes_file(self, config: AppConfig):
        config.log_level = "NOPE"
        _setup_logging(config)
        logger = logging.getLogger("bookshelf")
        try:
            assert logger.level == logging.INFO
            logging.getLogger("bookshelf.test").info("hello")
            for handler in logger.handlers:
                handler.flush()
            assert "hello" in config.log_path.read_text(encoding="utf-8")
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
