"""Pydantic schemas for WineList."""

from winelist.schemas.views import (
    Breadcrumb,
    DerivedView,
    FilterState,
    HomePage,
    MetaItem,
    PageView,
    RegionCard,
    RegionCount,
    RegionsPage,
    TypeSummary,
    ViewMode,
    WineCard,
    WineDetail,
    WineDetailPage,
    WinesPage,
    WineTableRow,
)
from winelist.schemas.wine import PLACEHOLDER, WineRecord, WineType

__all__ = [
    "PLACEHOLDER",
    "Breadcrumb",
    "DerivedView",
    "FilterState",
    "HomePage",
    "MetaItem",
    "PageView",
    "RegionCard",
    "RegionCount",
    "RegionsPage",
    "TypeSummary",
    "ViewMode",
    "WineCard",
    "WineDetail",
    "WineDetailPage",
    "WineRecord",
    "WineTableRow",
    "WineType",
    "WinesPage",
]
