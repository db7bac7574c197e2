"""Page endpoints.

Each request is one page load: a fresh controller is attached to the page and
seeded from the request's query parameters, then rendered. These endpoints
never fail on bad parameters; unknown ids produce a not-found page model.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Request

from winelist.controller import CatalogViewController, PageContext, parse_query_string
from winelist.routers._common import Catalog
from winelist.schemas.views import (
    HomePage,
    PageView,
    RegionsPage,
    ViewMode,
    WineDetailPage,
    WinesPage,
)

router = APIRouter()


def render_page(page: PageContext, request: Request, catalog: Catalog, **kwargs) -> PageView:
    params = parse_query_string(request.url.query)
    controller = CatalogViewController(page, params, catalog=catalog, **kwargs)
    return controller.render()


@router.get("/home", response_model=HomePage)
async def home_page(request: Request, catalog: Catalog) -> PageView:
    """Wine counts per type."""
    return render_page(PageContext.HOME, request, catalog)


@router.get("/regions", response_model=RegionsPage)
async def regions_page(request: Request, catalog: Catalog) -> PageView:
    """Region cards; ``q`` narrows the regions shown, ``type`` carries into links."""
    return render_page(PageContext.REGIONS, request, catalog)


@router.get("/wines", response_model=WinesPage)
async def wines_page(
    request: Request,
    catalog: Catalog,
    view: Annotated[ViewMode, Query(description="grid or table")] = ViewMode.GRID,
) -> PageView:
    """Wines for a region (and optional type), as cards and table rows."""
    return render_page(PageContext.WINES, request, catalog, view_mode=view)


@router.get("/wine-details", response_model=WineDetailPage)
async def wine_details_page(request: Request, catalog: Catalog) -> PageView:
    """Details of the wine given by ``id``."""
    return render_page(PageContext.WINE_DETAILS, request, catalog)
