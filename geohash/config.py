"""Settings read from ``GEOHASH_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_precision: int = 5
    log_level: str = "warning"

    model_config = {
        "env_prefix": "GEOHASH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Settings, built from the environment on first call."""
    return Settings()
