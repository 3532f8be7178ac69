"""Tests for the config module."""

import pytest

from procsheet.config import Settings, _parse_cors_origins


class TestParseCorsOrigins:
    """Test CORS origins parsing."""

    def test_parse_cors_origins_with_value(self, monkeypatch):
        """Test parsing CORS origins from environment variable."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://localhost:8080")
        result = _parse_cors_origins()
        assert result == ["http://localhost:3000", "http://localhost:8080"]

    def test_parse_cors_origins_without_value(self, monkeypatch):
        """Test default CORS origins when not set."""
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
        assert _parse_cors_origins() == ["*"]

    def test_parse_cors_origins_empty_string(self, monkeypatch):
        """Test parsing empty CORS origins defaults to wildcard."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "")
        assert _parse_cors_origins() == ["*"]


class TestSettings:
    """Test Settings configuration."""

    def test_settings_explicit_values(self):
        """Test Settings with explicit parameters."""
        settings = Settings(
            host="0.0.0.0",
            port=9000,
            debug=True,
            log_level="DEBUG",
            cors_allow_origins=["http://example.com"],
            max_grid_rows=10,
        )

        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.cors_allow_origins == ["http://example.com"]
        assert settings.max_grid_rows == 10

    def test_settings_types(self):
        """Test that defaults have the expected types."""
        settings = Settings()

        assert isinstance(settings.host, str)
        assert isinstance(settings.port, int)
        assert isinstance(settings.debug, bool)
        assert isinstance(settings.max_grid_rows, int)
        assert settings.max_grid_rows > 0

    def test_settings_validation(self):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            Settings(max_grid_rows="many")
