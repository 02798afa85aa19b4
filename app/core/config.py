"""Application settings loaded from environment / .env file."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Upstream API ──────────────────────────────────────
    instagram_base_url: str = "https://api.instagram.com/v1"
    instagram_client_id: str = ""
    instagram_username: str = "mimozaflowers"
    upstream_timeout_seconds: float = 10.0

    # ── Feed ──────────────────────────────────────────────
    media_count: int = Field(default=20, ge=1)
    items_per_row: int = Field(default=4, ge=1)

    # ── Cache ─────────────────────────────────────────────
    cache_ttl_seconds: float = Field(default=300.0, gt=0)
    cache_sweep_interval_seconds: float = Field(default=60.0, gt=0)

    # ── Server ────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3000


@lru_cache
def get_settings() -> Settings:
    return Settings()
