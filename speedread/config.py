"""Application configuration settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./data/speedread.db"

    # App
    app_name: str = "SpeedRead"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Content store
    allowed_origin: str = "*"
    max_content_size: int = 1_000_000  # bytes
    content_ttl_seconds: int = 7 * 24 * 60 * 60
    rate_limit_max: int = 10
    rate_limit_window_seconds: int = 60

    # Local key-value persistence
    local_store_path: str = "./data/local_store.json"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
