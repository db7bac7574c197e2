"""API routers for WineList."""

from winelist.routers import pages, regions, wines

__all__ = ["pages", "regions", "wines"]
