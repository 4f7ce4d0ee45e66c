"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WANDERPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generation capability (Gemini)
    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.4
    # None leaves the transport's own timeout in place
    gemini_timeout_ms: int | None = None

    # Skip real API calls and answer from the deterministic stub
    use_stub_llm: bool = False

    # UI
    backend_url: str = "http://localhost:8000"
    # False runs the pipeline inside the Streamlit process
    ui_call_backend: bool = True

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
