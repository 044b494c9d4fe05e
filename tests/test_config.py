"""Tests for application settings."""

from speedread.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MAX_CONTENT_SIZE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_name == "SpeedRead"
    assert settings.max_content_size == 1_000_000
    assert settings.content_ttl_seconds == 7 * 24 * 60 * 60
    assert settings.rate_limit_max == 10
    assert settings.rate_limit_window_seconds == 60
    assert settings.allowed_origin == "*"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGIN", "https://speedread.example")
    monkeypatch.setenv("RATE_LIMIT_MAX", "3")
    settings = Settings(_env_file=None)
    assert settings.allowed_origin == "https://speedread.example"
    assert settings.rate_limit_max == 3


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
