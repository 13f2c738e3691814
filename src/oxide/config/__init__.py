"""Configuration via environment variables."""

from .settings import LoggingSettings, OxideSettings, clear_settings_cache, get_settings

__all__ = ["OxideSettings", "LoggingSettings", "get_settings", "clear_settings_cache"]
