"""Pydantic schemas for filter state and the derived views handed to renderers."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from winelist.schemas.wine import WineRecord, WineType


class ViewMode(str, Enum):
    """How the wines page lays out its results."""

    GRID = "grid"
    TABLE = "table"


class FilterState(BaseModel):
    """The visitor's current filters.

    Instances are immutable; a change produces a new state so a derivation
    in progress always sees one consistent set of filters.
    """

    model_config = ConfigDict(frozen=True)

    type_filter: WineType | None = None
    region_filter: str | None = None
    search_text: str = ""

    @field_validator("region_filter", mode="before")
    @classmethod
    def empty_region_is_unset(cls, v: Any) -> Any:
        return v or None

    @field_validator("search_text", mode="before")
    @classmethod
    def none_search_is_empty(cls, v: Any) -> Any:
        return v or ""

    def update(self, **changes: Any) -> "FilterState":
        """Return a new state with the given fields replaced."""
        return FilterState(**{**self.model_dump(), **changes})

    @classmethod
    def from_query_params(
        cls, params: Mapping[str, str], type_filter: WineType | None = None
    ) -> "FilterState":
        """Seed the filters from already-decoded URL parameters.

        The ``type`` parameter must be resolved by the caller, which decides
        what an unrecognised value means.
        """
        return cls(
            type_filter=type_filter,
            region_filter=params.get("region"),
            search_text=params.get("q") or params.get("search") or "",
        )


class RegionCount(BaseModel):
    """A region and how many wines on the whole list come from it."""

    model_config = ConfigDict(frozen=True)

    region: str
    count: int = Field(..., ge=0)


class DerivedView(BaseModel):
    """Everything computed from the catalog and one FilterState."""

    model_config = ConfigDict(frozen=True)

    filters: FilterState
    filtered_wines: list[WineRecord] = []
    region_index: list[RegionCount] = []


class Breadcrumb(BaseModel):
    """One step of a breadcrumb trail; the last step has no link."""

    label: str
    href: str | None = None


class WineCard(BaseModel):
    """Card shown in the wines grid."""

    id: str
    name: str
    price: str
    region: str
    varietals: str
    description: str
    year: str
    href: str


class WineTableRow(BaseModel):
    """Row shown in the wines table."""

    id: str
    name: str
    region: str
    varietals: str
    year: str
    price: str
    href: str


class MetaItem(BaseModel):
    label: str
    value: str


class WineDetail(BaseModel):
    """Full description of one wine for the details page."""

    id: str
    name: str
    type: WineType
    type_name: str
    region: str
    price: str
    description: str
    meta: list[MetaItem]


class TypeSummary(BaseModel):
    """Home page entry for one wine type."""

    type: WineType
    display_name: str
    count: int
    href: str


class RegionCard(BaseModel):
    region: str
    count: int
    href: str


class HomePage(BaseModel):
    page: Literal["home"] = "home"
    total: int
    types: list[TypeSummary]


class RegionsPage(BaseModel):
    page: Literal["regions"] = "regions"
    title: str
    search: str
    type: WineType | None = None
    regions: list[RegionCard]
    breadcrumbs: list[Breadcrumb]


class WinesPage(BaseModel):
    page: Literal["wines"] = "wines"
    title: str
    region: str | None = None
    type: WineType | None = None
    search: str
    count: int
    view_mode: ViewMode
    cards: list[WineCard]
    rows: list[WineTableRow]
    breadcrumbs: list[Breadcrumb]


class WineDetailPage(BaseModel):
    """Details page; ``found`` is False and ``message`` is set when the id is unknown."""

    page: Literal["wine-details"] = "wine-details"
    found: bool
    message: str | None = None
    wine: WineDetail | None = None
    breadcrumbs: list[Breadcrumb] = []


PageView = HomePage | RegionsPage | WinesPage | WineDetailPage
