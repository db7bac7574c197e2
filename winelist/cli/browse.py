"""Command line browser for the WineList catalog.

Commands:
    serve     Run the JSON API server
    home      Show wine counts per type
    regions   List regions with wine counts
    wines     List wines, optionally filtered
    show      Show the details of one wine
    explore   Find a wine by exact name and print its details link
"""

import argparse
import asyncio
import logging
import sys

from winelist.config import settings
from winelist.controller import WINE_DETAILS_UNAVAILABLE, CatalogViewController, PageContext
from winelist.schemas.views import (
    HomePage,
    PageView,
    RegionsPage,
    ViewMode,
    WineDetailPage,
    WinesPage,
)
from winelist.services.catalog import CatalogLoader


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from the [logging] config section."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format=settings.log_format,
    )


async def open_page(
    page: PageContext,
    params: dict[str, str],
    source: str | None = None,
    view_mode: ViewMode = ViewMode.GRID,
) -> tuple[CatalogViewController, PageView]:
    """Attach a controller to a page, load the catalog and render it."""
    controller = CatalogViewController(page, params, view_mode=view_mode)
    view = await controller.load(CatalogLoader(source))
    return controller, view


def print_home(view: HomePage) -> None:
    print(f"{view.total} wines")
    for entry in view.types:
        print(f"  {entry.display_name:<18} {entry.count:>4}  ({entry.type.value})")


def print_regions(view: RegionsPage) -> None:
    if not view.regions:
        print("No regions found.")
        return
    print(view.title)
    width = max(len(card.region) for card in view.regions)
    for card in view.regions:
        print(f"  {card.region:<{width}}  {card.count:>4} wines")


def print_wines(view: WinesPage) -> None:
    print(f"{view.title} ({view.count} wines)")
    if not view.count:
        print("No wines found.")
        return

    if view.view_mode is ViewMode.TABLE:
        print(f"  {'Name':<40} {'Region':<22} {'Varietals':<28} {'Year':<5} {'Price':>8}")
        print("  " + "-" * 107)
        for row in view.rows:
            print(
                f"  {row.name[:40]:<40} {row.region[:22]:<22} "
                f"{row.varietals[:28]:<28} {row.year:<5} {row.price:>8}"
            )
        return

    for card in view.cards:
        print(f"\n  {card.name}  {card.price}")
        print(f"    {card.region} | {card.varietals} | {card.year}")
        print(f"    {card.description}")
        print(f"    -> {card.href}")


def print_detail(view: WineDetailPage) -> None:
    if not view.found or view.wine is None:
        print(view.message)
        return
    wine = view.wine
    print(" > ".join(crumb.label for crumb in view.breadcrumbs))
    print(f"\n{wine.name}  {wine.price}")
    print(wine.region)
    print(wine.description)
    for item in wine.meta:
        print(f"  {item.label:<14} {item.value}")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Browse the WineList catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--catalog", "-c", help="Catalog file or URL (overrides config)")
    parser.add_argument("--log-level", help="Logging level (overrides config)")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    serve_parser = subparsers.add_parser("serve", help="Run the JSON API server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    subparsers.add_parser("home", help="Show wine counts per type")

    regions_parser = subparsers.add_parser("regions", help="List regions with wine counts")
    regions_parser.add_argument("--search", "-s", default="", help="Narrow regions by name")

    wines_parser = subparsers.add_parser("wines", help="List wines")
    wines_parser.add_argument("--type", "-t", help="Wine type (ROSSO, BIANCO, RED, ...)")
    wines_parser.add_argument("--region", "-r", help="Exact region")
    wines_parser.add_argument("--search", "-s", default="", help="Search name, region, varietals")
    wines_parser.add_argument("--table", action="store_true", help="Show as a table")

    show_parser = subparsers.add_parser("show", help="Show the details of one wine")
    show_parser.add_argument("id", help="Wine id")

    explore_parser = subparsers.add_parser("explore", help="Find a wine by exact name")
    explore_parser.add_argument("name", help="Wine name")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level)

    if args.command == "serve":
        import uvicorn

        uvicorn.run(
            "winelist.main:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload,
        )
        return 0

    try:
        if args.command == "home":
            _, view = asyncio.run(open_page(PageContext.HOME, {}, args.catalog))
            print_home(view)

        elif args.command == "regions":
            _, view = asyncio.run(
                open_page(PageContext.REGIONS, {"q": args.search}, args.catalog)
            )
            print_regions(view)

        elif args.command == "wines":
            params = {"q": args.search}
            if args.type:
                params["type"] = args.type
            if args.region:
                params["region"] = args.region
            mode = ViewMode.TABLE if args.table else ViewMode.GRID
            _, view = asyncio.run(open_page(PageContext.WINES, params, args.catalog, mode))
            print_wines(view)

        elif args.command == "show":
            _, view = asyncio.run(
                open_page(PageContext.WINE_DETAILS, {"id": args.id}, args.catalog)
            )
            print_detail(view)
            if not view.found:
                return 1

        elif args.command == "explore":
            controller, _ = asyncio.run(open_page(PageContext.HOME, {}, args.catalog))
            href = controller.explore(args.name)
            if href is None:
                print(WINE_DETAILS_UNAVAILABLE)
                return 1
            print(href)

    except KeyboardInterrupt:
        print("\nAborted.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
