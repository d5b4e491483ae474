"""Tests for application settings parsing."""

import pytest

from api.config import Settings


def test_cors_origins_from_comma_separated_env(monkeypatch):
    """Parse CORS origins from comma-separated env var."""
    monkeypatch.setenv(
        "CORS_ORIGINS",
        "https://a.example, https://b.example",
    )
    settings = Settings()
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_from_json_env(monkeypatch):
    """Parse CORS origins from JSON array env var."""
    monkeypatch.setenv(
        "CORS_ORIGINS",
        '["https://a.example", "https://b.example"]',
    )
    settings = Settings()
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_empty_env(monkeypatch):
    """Treat empty CORS origins env as an empty list."""
    monkeypatch.setenv("CORS_ORIGINS", "")
    settings = Settings()
    assert settings.cors_origins == []


def test_cors_origins_invalid_json_env_raises(monkeypatch):
    """Reject invalid JSON that starts with [ but is not valid."""
    monkeypatch.setenv("CORS_ORIGINS", "[not json]")
    with pytest.raises(ValueError):
        Settings()


def test_max_document_chars_from_env(monkeypatch):
    """Read the document size limit from the environment."""
    monkeypatch.setenv("MAX_DOCUMENT_CHARS", "1000")
    assert Settings().max_document_chars == 1000


def test_max_document_chars_must_be_positive(monkeypatch):
    monkeypatch.setenv("MAX_DOCUMENT_CHARS", "0")
    with pytest.raises(ValueError):
        Settings()


def test_log_level_normalized(monkeypatch):
    """Accept lower-case level names."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_raises(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        Settings()


def test_debug_rejected_in_production(monkeypatch):
    """Production must not run with debug enabled."""
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("DEBUG", "true")
    with pytest.raises(ValueError):
        Settings()


def test_environment_flags(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    settings = Settings()
    assert settings.is_production
    assert not settings.is_development
