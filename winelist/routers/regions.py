"""Region index endpoint."""

from typing import Annotated

from fastapi import APIRouter, Query

from winelist.routers._common import Catalog
from winelist.schemas.views import RegionCount
from winelist.services.filters import build_region_index

router = APIRouter()


@router.get("", response_model=list[RegionCount])
async def list_regions(
    catalog: Catalog,
    q: Annotated[str | None, Query(description="Search by region name (partial match)")] = None,
) -> list[RegionCount]:
    """List regions alphabetically with the number of wines from each."""
    return build_region_index(catalog, q or "")
