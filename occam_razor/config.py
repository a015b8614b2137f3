"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting overridable through OCCAM_* environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: the stdio server works with zero configuration
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from occam_razor import __version__


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OCCAM_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Server identity (reported on initialize)
    server_name: str = "occams-razor-mcp-server"
    server_version: str = __version__

    # HTTP transport
    http_host: str = "127.0.0.1"
    http_port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability (always written to stderr)
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
