"""Pure derivations over the loaded wine list.

Every function here takes the catalog (and filters) as arguments and returns
new values; nothing is cached or mutated, so the same inputs always give the
same outputs.
"""

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from winelist.schemas.views import DerivedView, FilterState, RegionCount
from winelist.schemas.wine import PLACEHOLDER, WineRecord, WineType

# A four digit year in 1900-2099 standing on its own
YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")


def extract_year(vintage: str | None) -> str:
    """Pull the first 1900-2099 year out of a free text vintage.

    Returns "N/A" when the vintage is missing, empty or contains no year.
    """
    if not vintage:
        return PLACEHOLDER
    match = YEAR_PATTERN.search(vintage)
    return match.group(0) if match else PLACEHOLDER


def matches_search(wine: WineRecord, search_text: str) -> bool:
    """Case-insensitive substring match against name, region and varietals."""
    if not search_text:
        return True
    needle = search_text.lower()
    if needle in wine.name.lower() or needle in wine.region.lower():
        return True
    # Wines without varietals never match on them
    return bool(wine.varietals) and needle in wine.varietals.lower()


def matches(wine: WineRecord, filters: FilterState) -> bool:
    """Check whether a single wine passes every active filter."""
    if filters.type_filter is not None and wine.type != filters.type_filter:
        return False
    if filters.region_filter is not None and wine.region != filters.region_filter:
        return False
    return matches_search(wine, filters.search_text)


def filter_wines(catalog: Sequence[WineRecord], filters: FilterState) -> list[WineRecord]:
    """Wines passing the filters, in catalog order."""
    return [wine for wine in catalog if matches(wine, filters)]


def distinct_regions(catalog: Iterable[WineRecord]) -> list[str]:
    """Distinct non-blank regions, sorted by code point."""
    return sorted({wine.region for wine in catalog if wine.region and wine.region.strip()})


def build_region_index(catalog: Sequence[WineRecord], search_text: str = "") -> list[RegionCount]:
    """List every region with its number of wines.

    Only the search text narrows which regions are listed; type and region
    filters are ignored. Counts are always taken over the whole catalog.
    """
    counts = Counter(wine.region for wine in catalog)
    needle = search_text.lower() if search_text else ""
    return [
        RegionCount(region=region, count=counts[region])
        for region in distinct_regions(catalog)
        if not needle or needle in region.lower()
    ]


def count_by_type(catalog: Iterable[WineRecord]) -> dict[WineType, int]:
    """Number of wines of each type, with every type present."""
    counts = Counter(wine.type for wine in catalog)
    return {wine_type: counts[wine_type] for wine_type in WineType}


def resolve_wine(catalog: Sequence[WineRecord], wine_id: str | int | None) -> WineRecord | None:
    """Find a wine by id.

    Ids are compared by their string form. If the list repeats an id, the
    first wine carrying it wins. Returns None when nothing matches.
    """
    if wine_id is None:
        return None
    key = str(wine_id)
    return next((wine for wine in catalog if wine.id == key), None)


def find_by_name(catalog: Sequence[WineRecord], name: str) -> WineRecord | None:
    """Find the first wine whose name is exactly ``name``."""
    return next((wine for wine in catalog if wine.name == name), None)


def duplicate_ids(catalog: Iterable[WineRecord]) -> list[str]:
    """Ids that occur more than once, in order of first appearance."""
    counts = Counter(wine.id for wine in catalog)
    return [wine_id for wine_id, n in counts.items() if n > 1]


def derive(catalog: Sequence[WineRecord], filters: FilterState) -> DerivedView:
    """Compute the filtered wines and the region index for one filter state."""
    return DerivedView(
        filters=filters,
        filtered_wines=filter_wines(catalog, filters),
        region_index=build_region_index(catalog, filters.search_text),
    )
