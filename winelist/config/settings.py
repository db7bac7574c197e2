"""Global settings instance for WineList.

Combines the configuration from config.toml with environment variable
overrides and exposes it through a flat interface.
"""

from winelist.config.loader import load_config
from winelist.config.schema import WinelistConfig


class Settings:
    """Flat accessor over the structured WinelistConfig."""

    def __init__(self, config: WinelistConfig | None = None):
        """Initialize settings.

        Args:
            config: Optional WinelistConfig instance. If not provided, loads from file.
        """
        self._config = config or load_config()

    @property
    def config(self) -> WinelistConfig:
        """Get the full configuration object."""
        return self._config

    # Application
    @property
    def app_name(self) -> str:
        return self._config.app_name

    @property
    def debug(self) -> bool:
        return self._config.server.debug

    # Server
    @property
    def host(self) -> str:
        return self._config.server.host

    @property
    def port(self) -> int:
        return self._config.server.port

    @property
    def cors_origins(self) -> list[str]:
        return self._config.server.cors_origins

    # Catalog
    @property
    def catalog_source(self) -> str:
        return self._config.catalog.source

    @property
    def catalog_timeout(self) -> float:
        return self._config.catalog.timeout_seconds

    # Logging
    @property
    def log_level(self) -> str:
        return self._config.logging.level

    @property
    def log_format(self) -> str:
        return self._config.logging.format


# Global settings instance - lazily initialized
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    The settings are loaded once and cached for subsequent calls.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance.

    This is primarily useful for testing to reload configuration.
    """
    global _settings
    _settings = None


class _SettingsProxy:
    """Proxy object that lazily loads settings on first access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return repr(get_settings())


settings = _SettingsProxy()
