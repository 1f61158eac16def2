"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

KNOWN_PROVIDERS = ("openai", "gemini", "perplexity")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_token: str | None = None
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-1.5-flash"
    perplexity_api_key: str | None = None
    perplexity_model: str = "sonar"
    perplexity_base_url: str = "https://api.perplexity.ai"
    chat_provider_order: str = "openai,gemini,perplexity"
    provider_timeout_seconds: float = 10.0
    provider_retry_attempts: int = 1
    max_recognized_items: int = 5
    max_image_bytes: int = 5 * 1024 * 1024
    default_language: str = "ar"
    storage_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_provider_order(raw: str | None) -> list[str]:
    """Parse a comma-separated provider priority list from env."""
    if raw is None:
        return list(KNOWN_PROVIDERS)
    order: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().lower()
        if value in KNOWN_PROVIDERS and value not in order:
            order.append(value)
    return order or list(KNOWN_PROVIDERS)
