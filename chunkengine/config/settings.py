"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="chunkengine", description="Application name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Defaults used when a caller does not supply a ChunkConfig
    default_chunk_size: int = Field(default=1000, ge=1, description="Default chunk size (characters)")
    default_overlap: int = Field(default=0, ge=0, description="Default fixed-size overlap (characters)")
    default_strategy: str = Field(default="recursive", description="fixed|sentence|paragraph|recursive|semantic")

    # Async processing
    chunk_yield_every: int = Field(
        default=100, ge=1, description="Input units consumed between event-loop yields in chunk_async"
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
