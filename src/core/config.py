"""Application configuration and .env loading."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "traza"


def default_data_dir() -> Path:
    """Per-user local data directory for the application."""
    return Path(user_data_dir(APP_NAME, appauthor=False))


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    data_dir: Path = Field(
        default_factory=default_data_dir, validation_alias="TRAZA_DATA_DIR"
    )
    db_filename: str = Field(default="logs.db", validation_alias="TRAZA_DB_FILENAME")
    export_dir: Path = Field(
        default_factory=Path.home, validation_alias="TRAZA_EXPORT_DIR"
    )
    list_limit: int = Field(default=100, ge=1, validation_alias="TRAZA_LIST_LIMIT")
    busy_timeout: float = Field(
        default=5.0, ge=0.0, validation_alias="TRAZA_BUSY_TIMEOUT"
    )
    log_level: str = Field(default="WARNING", validation_alias="TRAZA_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["APP_NAME", "Settings", "default_data_dir", "get_settings"]
