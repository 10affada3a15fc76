"""Application settings and configuration management."""
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

load_dotenv(".env", verbose=False)


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Kanji lookup service
    kanji_api_base: str = Field(default="https://kanjiapi.dev/v1", alias="KANJI_API_BASE")
    http_timeout: float = Field(default=10.0, alias="JP_TUTOR_HTTP_TIMEOUT")
    fetch_workers: int = Field(default=16, alias="JP_TUTOR_FETCH_WORKERS")

    # Local cache
    cache_path: str = Field(
        default=str(Path.home() / ".jp_tutor" / "cache.db"), alias="JP_TUTOR_CACHE_PATH"
    )
    cache_ttl_hours: float = Field(default=24, alias="JP_TUTOR_CACHE_TTL_HOURS")
    cache_enabled: bool = Field(default=True, alias="JP_TUTOR_CACHE_ENABLED")

    # Chat model
    gemini_api_key: str = Field(default="", alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")
    chat_language: str = Field(default="Thai", alias="JP_TUTOR_CHAT_LANGUAGE")

    # Logging
    log_level: str = Field(default="WARNING", alias="JP_TUTOR_LOG_LEVEL")
    log_file: str = Field(default="", alias="JP_TUTOR_LOG_FILE")

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


def has_chat_config(settings: Settings | None = None) -> bool:
    """Check if the chat model can be reached."""
    settings = settings or get_settings()
    return bool(settings.gemini_api_key)
