"""Configuration loading for lexintake.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from lexintake.config import get_settings

    settings = get_settings()
    level = settings.observability.logging.level
"""

from functools import lru_cache

from lexintake.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `reload_settings()` to pick up changed files or env vars.
    """
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
