"""Settings for apitemplate: code defaults, then TOML files, then
``APITEMPLATE_*`` environment variables.

Usage:
    from apitemplate.config import get_settings

    timeout = get_settings().http.timeout_seconds
"""

from functools import lru_cache

from apitemplate.config.loader import load_config
from apitemplate.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process; see reload_settings()."""
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and read the files and environment again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
