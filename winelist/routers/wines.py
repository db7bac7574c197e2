"""Wine listing and lookup endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from winelist.routers._common import Catalog, require_wine_type
from winelist.schemas.views import FilterState
from winelist.schemas.wine import WineRecord
from winelist.services.filters import filter_wines, resolve_wine

router = APIRouter()


@router.get("", response_model=list[WineRecord])
async def list_wines(
    catalog: Catalog,
    type: Annotated[str | None, Query(description="Wine type code or name")] = None,
    region: Annotated[str | None, Query(description="Exact region")] = None,
    q: Annotated[str | None, Query(description="Search name, region and varietals")] = None,
) -> list[WineRecord]:
    """List wines in list order, narrowed by type, region and search text."""
    filters = FilterState(
        type_filter=require_wine_type(type),
        region_filter=region,
        search_text=q,
    )
    return filter_wines(catalog, filters)


@router.get("/{wine_id}", response_model=WineRecord)
async def get_wine(wine_id: str, catalog: Catalog) -> WineRecord:
    """Get a wine by its id."""
    wine = resolve_wine(catalog, wine_id)
    if wine is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wine not found")
    return wine
