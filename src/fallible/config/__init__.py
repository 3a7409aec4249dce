"""Configuration management using pydantic-settings."""

from .settings import FallibleSettings, TraceSettings, clear_settings_cache, get_settings

__all__ = [
    "FallibleSettings",
    "TraceSettings",
    "clear_settings_cache",
    "get_settings",
]
