"""Catalog view controller.

One controller lives for one page load. It is told which page it is attached
to and the URL parameters it was opened with, holds the loaded catalog and
the visitor's filters, and turns them into the page view model on demand.
Moving to another page means building a new controller.
"""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from urllib.parse import parse_qsl, urlsplit

from pydantic import BaseModel, ConfigDict

from winelist.schemas.views import (
    DerivedView,
    FilterState,
    HomePage,
    PageView,
    RegionsPage,
    ViewMode,
    WineDetailPage,
    WinesPage,
)
from winelist.schemas.wine import WineRecord, WineType, parse_wine_type
from winelist.services.catalog import CatalogLoader
from winelist.services.filters import derive, find_by_name, resolve_wine
from winelist.services.presentation import (
    detail_breadcrumbs,
    detail_href,
    region_cards,
    regions_breadcrumbs,
    type_summaries,
    wine_card,
    wine_detail,
    wine_table_row,
    wines_breadcrumbs,
    wines_title,
)

logger = logging.getLogger(__name__)

WINE_NOT_FOUND = "Wine not found"
WINE_DETAILS_UNAVAILABLE = "Wine details not available"


class PageContext(str, Enum):
    """The page a controller is attached to."""

    HOME = "index"
    REGIONS = "regions"
    WINES = "wines"
    WINE_DETAILS = "wine-details"


class HomeState(BaseModel):
    model_config = ConfigDict(frozen=True)


class RegionsListState(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: WineType | None = None


class WineListState(BaseModel):
    model_config = ConfigDict(frozen=True)

    region: str | None = None
    type: WineType | None = None


class WineDetailState(BaseModel):
    model_config = ConfigDict(frozen=True)

    wine_id: str | None = None


ViewState = HomeState | RegionsListState | WineListState | WineDetailState


def parse_type_param(value: str | None) -> WineType | None:
    """Resolve the ``type`` URL parameter; unknown values are ignored."""
    if not value:
        return None
    wine_type = parse_wine_type(value)
    if wine_type is None:
        logger.warning("Ignoring unknown wine type parameter: %r", value)
    return wine_type


def resolve_view_state(
    page: PageContext, params: Mapping[str, str], wine_type: WineType | None = None
) -> ViewState:
    """Work out the view state from the page and its URL parameters."""
    if page is PageContext.REGIONS:
        return RegionsListState(type=wine_type)
    if page is PageContext.WINES:
        return WineListState(region=params.get("region") or None, type=wine_type)
    if page is PageContext.WINE_DETAILS:
        return WineDetailState(wine_id=params.get("id") or None)
    return HomeState()


def parse_query_string(query: str) -> dict[str, str]:
    """Decode a query string, keeping the first value of repeated keys."""
    params: dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


class CatalogViewController:
    """Owns the catalog and filter state for a single page.

    Every mutation replaces the filter state and returns a freshly rendered
    page view. Rendering works on a snapshot of the catalog and filters taken
    when it starts, so one render always reflects a single consistent state.
    """

    def __init__(
        self,
        page: PageContext | str,
        params: Mapping[str, str] | None = None,
        catalog: Iterable[WineRecord] | None = None,
        view_mode: ViewMode | str = ViewMode.GRID,
    ) -> None:
        self.page = PageContext(page)
        params = dict(params or {})

        wine_type = parse_type_param(params.get("type"))
        self.state: ViewState = resolve_view_state(self.page, params, wine_type)
        self.filters = FilterState.from_query_params(params, type_filter=wine_type)
        self.view_mode = ViewMode(view_mode)

        self._catalog: tuple[WineRecord, ...] = tuple(catalog) if catalog is not None else ()
        self.loaded = catalog is not None
        self._derived: DerivedView | None = None

    @classmethod
    def from_url(cls, page: PageContext | str, url: str, **kwargs) -> "CatalogViewController":
        """Build a controller from a full URL or a bare query string."""
        query = urlsplit(url).query if "?" in url or "://" in url else url
        return cls(page, parse_query_string(query), **kwargs)

    @property
    def catalog(self) -> tuple[WineRecord, ...]:
        return self._catalog

    async def load(self, loader: CatalogLoader | None = None) -> PageView:
        """Load the catalog and render the page.

        Until this completes the catalog is empty and every view renders
        empty. A failed load also leaves it empty.
        """
        wines = await (loader or CatalogLoader()).load()
        self._catalog = tuple(wines)
        self.loaded = True
        self._derived = None
        return self.render()

    def derive(self) -> DerivedView:
        """Derived data for the current filters, recomputed after each change."""
        catalog, filters = self._catalog, self.filters
        derived = self._derived
        if derived is None or derived.filters != filters:
            derived = derive(catalog, filters)
            self._derived = derived
        return derived

    # Visitor interactions

    def update_filters(self, **changes) -> PageView:
        self.filters = self.filters.update(**changes)
        self._derived = None
        return self.render()

    def set_search(self, text: str | None) -> PageView:
        return self.update_filters(search_text=text or "")

    def set_type_filter(self, wine_type: WineType | str | None) -> PageView:
        if isinstance(wine_type, str):
            wine_type = parse_type_param(wine_type)
        return self.update_filters(type_filter=wine_type)

    def set_region_filter(self, region: str | None) -> PageView:
        return self.update_filters(region_filter=region)

    def toggle_view(self, mode: ViewMode | str) -> PageView:
        self.view_mode = ViewMode(mode)
        return self.render()

    def explore(self, name: str) -> str | None:
        """Link to the details page of the wine with this exact name."""
        wine = find_by_name(self._catalog, name)
        if wine is None:
            logger.warning("%s: %r", WINE_DETAILS_UNAVAILABLE, name)
            return None
        return detail_href(wine.id)

    # Rendering

    def render(self) -> PageView:
        """Build the view model for the attached page."""
        state = self.state
        if isinstance(state, RegionsListState):
            return self._render_regions()
        if isinstance(state, WineListState):
            return self._render_wines()
        if isinstance(state, WineDetailState):
            return self._render_detail(state)
        return HomePage(total=len(self._catalog), types=type_summaries(self._catalog))

    def _render_regions(self) -> RegionsPage:
        derived = self.derive()
        filters = derived.filters
        return RegionsPage(
            title="WINE REGIONS",
            search=filters.search_text,
            type=filters.type_filter,
            regions=region_cards(derived.region_index, filters.type_filter),
            breadcrumbs=regions_breadcrumbs(),
        )

    def _render_wines(self) -> WinesPage:
        derived = self.derive()
        filters = derived.filters
        wines = derived.filtered_wines
        return WinesPage(
            title=wines_title(filters.region_filter, filters.type_filter),
            region=filters.region_filter,
            type=filters.type_filter,
            search=filters.search_text,
            count=len(wines),
            view_mode=self.view_mode,
            cards=[wine_card(wine) for wine in wines],
            rows=[wine_table_row(wine) for wine in wines],
            breadcrumbs=wines_breadcrumbs(filters.region_filter),
        )

    def _render_detail(self, state: WineDetailState) -> WineDetailPage:
        wine = resolve_wine(self._catalog, state.wine_id)
        if wine is None:
            if self.loaded:
                logger.warning("%s: %r", WINE_NOT_FOUND, state.wine_id)
            return WineDetailPage(found=False, message=WINE_NOT_FOUND)
        return WineDetailPage(
            found=True,
            wine=wine_detail(wine),
            breadcrumbs=detail_breadcrumbs(wine),
        )
