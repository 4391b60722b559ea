"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The upstream base URL is the only setting that changes core behavior
    - upstream_base_url never ends with a slash (paths are appended as "/{id}")
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Pool and timeout defaults match the upstream's expected load:
      100 connections total, 20 kept alive, 2s pool wait, 5s connect, 10s read
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream employee service
    upstream_base_url: str = "http://localhost:8112/api/v1/employee"

    @field_validator("upstream_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    upstream_connect_timeout_seconds: float = 5.0
    upstream_read_timeout_seconds: float = 10.0
    upstream_pool_timeout_seconds: float = 2.0
    upstream_max_connections: int = 100
    upstream_max_keepalive_connections: int = 20

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
