"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # ==========================================================================
    # Environment
    # ==========================================================================

    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # ==========================================================================
    # API Server
    # ==========================================================================

    api_host: str = "0.0.0.0"
    api_port: int = 3000
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    static_dir: str = "public"

    # ==========================================================================
    # AI / LLM
    # ==========================================================================

    # Primary: Gemini (accepts either GOOGLE_API_KEY or GEMINI_API_KEY)
    google_api_key: str = ""
    gemini_api_key: str = ""  # Alias for google_api_key
    gemini_model: str = "gemini-2.0-flash"

    # Fallback providers
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-5-haiku-latest"

    # Which provider to use
    llm_provider: str = "gemini"

    # ==========================================================================
    # Translation
    # ==========================================================================

    target_language: str = "ja"
    source_language: str = ""  # Empty = let the model detect it
    translation_context: str = "web page article"
    translation_failure_text: str = "(翻訳失敗)"
    translation_cache_enabled: bool = True

    # ==========================================================================
    # Streaming
    # ==========================================================================

    batch_size: int = 3
    max_batch_sentences: int = 100
    batch_delay_ms: int = 100

    # ==========================================================================
    # Page fetching
    # ==========================================================================

    fetch_timeout_seconds: float = 20.0
    fetch_user_agent: str = "Mozilla/5.0"

    # Sentence cache policy. Unset means the cache grows for the life of
    # the process and entries never expire.
    page_cache_max_entries: int | None = None
    page_cache_ttl_seconds: float | None = None

    # ==========================================================================
    # Optional Services
    # ==========================================================================

    sentry_dsn: str = ""

    # ==========================================================================
    # Helpers
    # ==========================================================================

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def batch_delay_seconds(self) -> float:
        return self.batch_delay_ms / 1000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging once at startup."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
