"""Environment-based configuration using pydantic-settings.

Example:
    >>> from oxide.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # OXIDE_LOG_LEVEL=DEBUG
    # OXIDE_TRACE_PIPELINES=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OXIDE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class OxideSettings(BaseSettings):
    """Root settings, loaded from ``OXIDE_``-prefixed environment variables.

    Example environment variables:
        OXIDE_LOG_LEVEL=DEBUG
        OXIDE_LOG_FORMAT=json
        OXIDE_TRACE_PIPELINES=true
        OXIDE_REPR_LIMIT=500
    """

    model_config = SettingsConfigDict(
        env_prefix="OXIDE_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    trace_pipelines: bool = Field(default=False, description="Log every pipeline step at DEBUG")
    repr_limit: Annotated[int, Field(ge=16)] = Field(
        default=200,
        description="Max characters of a payload rendering in error messages",
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> OxideSettings:
    """Get the global settings instance (cached)."""
    return OxideSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
