"""Tests for src/infrastructure/settings.py"""

import pytest
from pydantic import ValidationError

from infrastructure.settings import PaginationSettings, get_settings


class TestPaginationSettings:
    def test_defaults(self):
        settings = PaginationSettings()
        assert settings.default_page_size == 10
        assert settings.default_block_size == 5
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_DEFAULT_PAGE_SIZE", "25")
        monkeypatch.setenv("PAGINATION_DEFAULT_BLOCK_SIZE", "7")
        monkeypatch.setenv("PAGINATION_LOG_LEVEL", "DEBUG")
        settings = get_settings()
        assert settings.default_page_size == 25
        assert settings.default_block_size == 7
        assert settings.log_level == "DEBUG"

    def test_environment_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("pagination_default_page_size", "40")
        assert get_settings().default_page_size == 40

    @pytest.mark.parametrize("value", ["0", "-5", "lots"])
    def test_rejects_invalid_page_size(self, monkeypatch, value):
        monkeypatch.setenv("PAGINATION_DEFAULT_PAGE_SIZE", value)
        with pytest.raises(ValidationError):
            get_settings()

    def test_explicit_values(self):
        settings = PaginationSettings(default_page_size=50, default_block_size=10)
        assert settings.default_page_size == 50
        assert settings.default_block_size == 10
