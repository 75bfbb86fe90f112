"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from research_intel.constants import (
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    SEMANTIC_SCHOLAR_BASE_URL,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Transport
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Semantic Scholar
    semantic_scholar_base_url: str = SEMANTIC_SCHOLAR_BASE_URL
    semantic_scholar_api_key: str = ""
    request_timeout_seconds: float = DEFAULT_TIMEOUT

    # Payments (read by the billing collaborator, never by handlers)
    payments_pay_to: str = ""
    payments_network: str = "base"
    payments_facilitator_url: str = ""

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
