"""Application settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..common.constants import CHUNK_SIZE, PARTIAL_READ_SIZE
from ..common.exceptions import ConfigError


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DUPSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hashing
    partial_read_size: int = Field(
        default=PARTIAL_READ_SIZE,
        gt=0,
        description="Bytes read by the partial hash pass",
    )
    chunk_size: int = Field(
        default=CHUNK_SIZE,
        gt=0,
        description="Read buffer size for content hashing",
    )

    # Scan settings
    min_file_size: int = Field(
        default=0,
        ge=0,
        description="Minimum file size in bytes to consider",
    )
    byte_compare: bool = Field(
        default=False,
        description="Confirm hash matches with a byte-by-byte comparison",
    )
    ignore_hardlinks: bool = Field(
        default=False,
        description="Report only one path per inode",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


def default_settings() -> Settings:
    """Built-in defaults, ignoring DUPSCAN_* variables and .env files."""
    return Settings.model_construct()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
    return _settings


def reset_settings() -> None:
    """Reset global settings instance."""
    global _settings
    _settings = None
