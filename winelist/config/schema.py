"""Pydantic models for WineList configuration.

These models define the structure of config.toml.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """API server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    # CORS configuration - empty list means same-origin only
    cors_origins: list[str] = []


class CatalogConfig(BaseModel):
    """Where the static wine catalog is read from."""

    # A file path or an http(s) URL returning {"wines": [...]}
    source: str = "data/wines.json"
    timeout_seconds: float = Field(10.0, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class WinelistConfig(BaseModel):
    """Main WineList configuration loaded from config.toml."""

    app_name: str = "WineList"
    server: ServerConfig = Field(default_factory=ServerConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
