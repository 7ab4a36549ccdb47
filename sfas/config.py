"""Runtime configuration for SFAS.

Values come from ``SFAS_``-prefixed environment variables or a
``.env`` file in the working directory, e.g. ``SFAS_DB_PATH`` or
``SFAS_ROUND_BONUS_AMOUNTS=false``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sfas.db.connection import DEFAULT_DB_PATH


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SFAS_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    DB_PATH: Path = DEFAULT_DB_PATH
    HOST: str = "127.0.0.1"
    PORT: int = 8086
    CORS_ORIGINS: str = "*"  # CSV or '*'
    ROUND_BONUS_AMOUNTS: bool = True
    LOG_LEVEL: str = "INFO"

    @field_validator("PORT")
    @classmethod
    def _port_in_range(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {v}")
        return v

    @field_validator("DB_PATH")
    @classmethod
    def _expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    @property
    def CORS_ORIGINS_LIST(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_config() -> AppConfig:
    """Return the process-wide configuration, read once."""
    return AppConfig()
