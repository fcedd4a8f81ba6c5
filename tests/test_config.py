"""
Tests for application Settings.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    def test_log_level_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_environment_rejected(self):
        with pytest.raises(ValidationError):
            Settings(environment="moon")

    def test_api_prefix(self):
        assert Settings(api_version="v2").api_prefix == "/api/v2"

    def test_app_port_env_var(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.setenv("APP_PORT", "9000")

        assert Settings().port == 9000

    def test_database_url_from_env(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/books")

        settings = Settings()

        assert settings.database_url == "postgresql://u:p@db:5432/books"
        assert not settings.is_sqlite

    def test_sqlite_detected(self):
        assert Settings(database_url="sqlite://").is_sqlite
