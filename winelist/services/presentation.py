"""Build the plain view models the page renderer displays.

Nothing here touches markup: each function maps wine records (or derived
data) to schemas that carry display-ready strings and outbound links.
"""

from collections.abc import Sequence
from urllib.parse import quote

from winelist.schemas.views import (
    Breadcrumb,
    MetaItem,
    RegionCard,
    RegionCount,
    TypeSummary,
    WineCard,
    WineDetail,
    WineTableRow,
)
from winelist.schemas.wine import DEFAULT_DESCRIPTION, PLACEHOLDER, WineRecord, WineType
from winelist.services.filters import count_by_type, extract_year

HOME_PAGE = "index.html"
REGIONS_PAGE = "regions.html"
WINES_PAGE = "wines.html"
DETAILS_PAGE = "wine-details.html"


def encode_component(value: str) -> str:
    """Percent-encode a query value the way browsers' encodeURIComponent does."""
    return quote(value, safe="!*'()")


def detail_href(wine_id: str) -> str:
    return f"{DETAILS_PAGE}?id={encode_component(wine_id)}"


def regions_href(wine_type: WineType | None = None) -> str:
    if wine_type is None:
        return REGIONS_PAGE
    return f"{REGIONS_PAGE}?type={wine_type.value}"


def wines_href(region: str, wine_type: WineType | None = None) -> str:
    region_param = f"region={encode_component(region)}"
    if wine_type is None:
        return f"{WINES_PAGE}?{region_param}"
    return f"{WINES_PAGE}?type={wine_type.value}&{region_param}"


def format_price(price: float | None) -> str:
    """Render a price as ``$25`` or ``$18.5``."""
    if price is None:
        return PLACEHOLDER
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price}"


def or_placeholder(value: str | None) -> str:
    return value if value else PLACEHOLDER


def wine_card(wine: WineRecord) -> WineCard:
    return WineCard(
        id=wine.id,
        name=wine.name,
        price=format_price(wine.price),
        region=wine.region,
        varietals=or_placeholder(wine.varietals),
        description=wine.description or DEFAULT_DESCRIPTION,
        year=extract_year(wine.vintage),
        href=detail_href(wine.id),
    )


def wine_table_row(wine: WineRecord) -> WineTableRow:
    return WineTableRow(
        id=wine.id,
        name=wine.name,
        region=wine.region,
        varietals=or_placeholder(wine.varietals),
        year=extract_year(wine.vintage),
        price=format_price(wine.price),
        href=detail_href(wine.id),
    )


def wine_detail(wine: WineRecord) -> WineDetail:
    """Details page content for one wine, including its meta items."""
    return WineDetail(
        id=wine.id,
        name=wine.name,
        type=wine.type,
        type_name=wine.type.display_name,
        region=wine.region,
        price=format_price(wine.price),
        description=wine.description or DEFAULT_DESCRIPTION,
        meta=[
            MetaItem(label="Grape Variety", value=or_placeholder(wine.varietals)),
            MetaItem(label="Vintage", value=extract_year(wine.vintage)),
            MetaItem(label="Alcohol", value=or_placeholder(wine.alcohol)),
            MetaItem(label="Aging", value=or_placeholder(wine.aging)),
        ],
    )


def type_summaries(catalog: Sequence[WineRecord]) -> list[TypeSummary]:
    """Home page entries, one per wine type in list order."""
    counts = count_by_type(catalog)
    return [
        TypeSummary(
            type=wine_type,
            display_name=wine_type.display_name,
            count=counts[wine_type],
            href=regions_href(wine_type),
        )
        for wine_type in WineType
    ]


def region_cards(
    region_index: Sequence[RegionCount], wine_type: WineType | None = None
) -> list[RegionCard]:
    return [
        RegionCard(
            region=entry.region,
            count=entry.count,
            href=wines_href(entry.region, wine_type),
        )
        for entry in region_index
    ]


def wines_title(region: str | None, wine_type: WineType | None) -> str:
    """Heading for the wines page, e.g. "TOSCANA Red Wines" or "TOSCANA WINES"."""
    if region and wine_type:
        return f"{region} {wine_type.display_name}"
    if region:
        return f"{region} WINES"
    if wine_type:
        return wine_type.display_name
    return "WINES"


def regions_breadcrumbs() -> list[Breadcrumb]:
    return [
        Breadcrumb(label="Home", href=HOME_PAGE),
        Breadcrumb(label="Wine Regions"),
    ]


def wines_breadcrumbs(region: str | None) -> list[Breadcrumb]:
    return [
        Breadcrumb(label="Home", href=HOME_PAGE),
        Breadcrumb(label="Wine Regions", href=REGIONS_PAGE),
        Breadcrumb(label=region or "All Wines"),
    ]


def detail_breadcrumbs(wine: WineRecord) -> list[Breadcrumb]:
    return [
        Breadcrumb(label="Home", href=HOME_PAGE),
        Breadcrumb(label=wine.type.display_name, href=regions_href(wine.type)),
        Breadcrumb(label=wine.region, href=wines_href(wine.region, wine.type)),
        Breadcrumb(label=wine.name),
    ]
