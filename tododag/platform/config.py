from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (``TODODAG_LOG_LEVEL``),
    # so matching is case-insensitive.
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="TODODAG_", case_sensitive=False, extra="ignore"
    )

    log_level: str = "INFO"
    graph_inputs_dir: Optional[Path] = None


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
