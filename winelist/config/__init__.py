"""WineList configuration module.

This module provides TOML-based configuration with environment variable overrides.

Configuration is loaded from the following locations (in order of priority):
1. Environment variables (highest priority)
2. ./config.toml (project root - for development)
3. ~/.config/winelist/config.toml (user config)
4. /etc/winelist/config.toml (system config)
"""

from winelist.config.schema import (
    CatalogConfig,
    LoggingConfig,
    ServerConfig,
    WinelistConfig,
)
from winelist.config.settings import get_settings, reset_settings, settings

__all__ = [
    "CatalogConfig",
    "LoggingConfig",
    "ServerConfig",
    "WinelistConfig",
    "get_settings",
    "reset_settings",
    "settings",
]
