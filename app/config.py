"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All environment variables understood by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── App ───────────────────────────────────────────────────
    app_name: str = "blog-posts-api"
    debug: bool = False
    log_level: str = "INFO"

    # ── HTTP ──────────────────────────────────────────────────
    api_prefix: str = ""             # e.g. "/api" → /api/blog-posts
    cors_origins: list[str] = ["*"]

    # ── Store ─────────────────────────────────────────────────
    seed_sample_posts: bool = False  # start with "Title 1" and "Title 2"


# Singleton — import this wherever config is needed
settings = Settings()
