"""
Todo API — Settings Tests
==========================

What:  Tests for environment-driven configuration parsing.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:

    def test_cors_lists_are_split_and_trimmed(self):
        s = Settings(
            cors_origins="http://a.test, http://b.test ,",
            cors_allow_methods="get, patch",
        )

        assert s.cors_origins_list == ["http://a.test", "http://b.test"]
        assert s.cors_allow_methods_list == ["GET", "PATCH"]

    def test_log_level_is_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("sqlite+aiosqlite:///./todo.db", True),
            ("postgresql+asyncpg://u:p@localhost/todo_db", False),
        ],
    )
    def test_is_sqlite(self, url, expected):
        assert Settings(database_url=url).is_sqlite is expected

    def test_database_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://x:y@db:5432/other")
        assert Settings().database_url.endswith("@db:5432/other")
