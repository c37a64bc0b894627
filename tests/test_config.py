# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_database_url_required(self, monkeypatch):
        """Startup configuration fails without a connection string."""
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/users")
        monkeypatch.setenv("API_PORT", "9000")

        settings = Settings(_env_file=None)

        assert settings.DATABASE_URL == "postgresql://u:p@db:5432/users"
        assert settings.API_PORT == 9000

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("API_PORT", raising=False)

        settings = Settings(DATABASE_URL="sqlite://", _env_file=None)

        assert settings.API_PORT == 8000

    def test_cors_origins_list(self):
        settings = Settings(
            DATABASE_URL="sqlite://",
            CORS_ORIGINS="http://localhost:3000, https://example.com,",
            _env_file=None,
        )

        assert settings.cors_origins_list == ["http://localhost:3000", "https://example.com"]

    def test_is_production(self):
        settings = Settings(DATABASE_URL="sqlite://", ENVIRONMENT="production", _env_file=None)

        assert settings.is_production is True
