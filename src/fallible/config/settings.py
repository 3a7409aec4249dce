"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fallible.config import get_settings
    >>> settings = get_settings()
    >>> settings.trace.enabled
    True

    # Or with environment variables:
    # FALLIBLE_TRACE_ENABLED=false
    # FALLIBLE_TRACE_LIMIT=20
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class TraceSettings(BaseSettings):
    """Origin-trace capture for Err values."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_TRACE_",
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Capture the call stack when an Err is built")
    limit: PositiveInt | None = Field(default=None, description="Max frames kept (innermost first)")


class FallibleSettings(BaseSettings):
    """Root settings for fallible.

    Loads configuration from environment variables with FALLIBLE_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        FALLIBLE_TRACE_ENABLED=false
        FALLIBLE_TRACE_LIMIT=10
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    trace: TraceSettings = Field(default_factory=TraceSettings)


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Get the global settings instance (cached)."""
    return FallibleSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
