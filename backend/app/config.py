"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_name: str = "Vid2Blog"
    environment: str = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    cors_origins: list[str] = ["http://localhost:3000"]  # Next.js dev server
    log_level: str = "INFO"

    # AI/LLM Providers
    llm_provider: Literal["gemini", "anthropic", "mock"] = "gemini"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    generation_temperature: float = 0.7
    generation_max_tokens: int = 4000
    generation_timeout_seconds: float | None = 120.0

    # Simulated extraction/transcription latency
    extraction_delay_seconds: float = 1.0
    transcription_delay_seconds: float = 1.5

    # Cosmetic progress stream
    progress_interval_seconds: float = 1.5

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
