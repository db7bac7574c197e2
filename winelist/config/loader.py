"""Configuration loader for WineList.

Loads configuration from a TOML file. Environment variables can override
any configuration value.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from winelist.config.schema import WinelistConfig

logger = logging.getLogger(__name__)

# Keys whose environment values need converting before validation
_INT_KEYS = ("port",)
_FLOAT_KEYS = ("timeout_seconds",)
_BOOL_KEYS = ("debug",)
_LIST_KEYS = ("cors_origins",)


def get_config_search_paths() -> list[Path]:
    """Get the list of paths to search for configuration files.

    Returns paths in priority order (first found wins):
    1. ./config.toml (project root - for development)
    2. ~/.config/winelist/config.toml (user config)
    3. /etc/winelist/config.toml (system config)
    """
    return [
        Path.cwd() / "config.toml",
        Path.home() / ".config" / "winelist" / "config.toml",
        Path("/etc/winelist/config.toml"),
    ]


def find_config_file() -> Path | None:
    """Find the first existing config file from search paths."""
    for path in get_config_search_paths():
        if path.exists() and path.is_file():
            logger.debug("Found config file: %s", path)
            return path
    return None


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _convert_env_value(key: str, value: str) -> Any:
    if key in _INT_KEYS:
        return int(value)
    if key in _FLOAT_KEYS:
        return float(value)
    if key in _BOOL_KEYS:
        return value.lower() in ("true", "1", "yes")
    if key in _LIST_KEYS:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def apply_env_overrides(config_dict: dict[str, Any], prefix: str = "WINELIST") -> None:
    """Apply environment variable overrides to configuration dictionary.

    Environment variables are mapped as follows:
    - WINELIST_SERVER_HOST -> config_dict["server"]["host"]
    - WINELIST_CATALOG_SOURCE -> config_dict["catalog"]["source"]
    - etc.

    Note: This modifies config_dict in place.
    """
    env_mappings = {
        f"{prefix}_APP_NAME": (None, "app_name"),
        # Server
        f"{prefix}_SERVER_HOST": ("server", "host"),
        f"{prefix}_SERVER_PORT": ("server", "port"),
        f"{prefix}_SERVER_DEBUG": ("server", "debug"),
        f"{prefix}_SERVER_CORS_ORIGINS": ("server", "cors_origins"),
        f"{prefix}_DEBUG": ("server", "debug"),  # Shorthand
        f"{prefix}_HOST": ("server", "host"),  # Shorthand
        f"{prefix}_PORT": ("server", "port"),  # Shorthand
        # Catalog
        f"{prefix}_CATALOG_SOURCE": ("catalog", "source"),
        f"{prefix}_CATALOG_TIMEOUT_SECONDS": ("catalog", "timeout_seconds"),
        # Logging
        f"{prefix}_LOGGING_LEVEL": ("logging", "level"),
        f"{prefix}_LOG_LEVEL": ("logging", "level"),  # Shorthand
    }

    for env_var, (section, key) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is None:
            continue

        converted = _convert_env_value(key, value)
        if key == "level":
            converted = converted.upper()

        if section is None:
            config_dict[key] = converted
        else:
            config_dict.setdefault(section, {})[key] = converted


def load_config(config_file: Path | None = None) -> WinelistConfig:
    """Load configuration from TOML file with environment variable overrides.

    Args:
        config_file: Optional path to config file. If not provided,
                     searches default locations.

    Returns:
        WinelistConfig instance with all settings loaded.
    """
    config_dict: dict[str, Any] = {}

    if config_file is None:
        config_file = find_config_file()

    if config_file and config_file.exists():
        logger.info("Loading config from: %s", config_file)
        config_dict = load_toml_file(config_file)
    else:
        logger.info("No config file found, using defaults with env overrides")

    apply_env_overrides(config_dict)

    return WinelistConfig(**config_dict)
