"""Services for WineList application."""

from winelist.services.catalog import CatalogLoader, CatalogUnavailableError

__all__ = ["CatalogLoader", "CatalogUnavailableError"]
