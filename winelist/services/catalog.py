"""Catalog loader for the static wine list.

The list is a single JSON document of the form ``{"wines": [...]}`` read from
a local file or fetched over HTTP. Any failure to read or parse it leaves the
application with an empty list rather than an error.
"""

import json
import logging
from pathlib import Path
from typing import Any

import aiofiles
import httpx
from pydantic import ValidationError

from winelist.config import settings
from winelist.schemas.wine import WineRecord
from winelist.services.filters import duplicate_ids

logger = logging.getLogger(__name__)


class CatalogUnavailableError(Exception):
    """Raised when the catalog source cannot be read or decoded."""

    pass


def parse_catalog(data: Any) -> list[WineRecord]:
    """Turn a decoded catalog document into wine records.

    A document without a ``wines`` list yields an empty catalog. Records that
    fail validation are skipped and logged; the others keep their order.
    """
    if not isinstance(data, dict):
        logger.warning("Catalog document is not an object, treating as empty")
        return []

    raw_wines = data.get("wines")
    if raw_wines is None:
        logger.warning("Catalog document has no 'wines' key, treating as empty")
        return []
    if not isinstance(raw_wines, list):
        logger.warning("Catalog 'wines' entry is not a list, treating as empty")
        return []

    wines: list[WineRecord] = []
    for position, raw in enumerate(raw_wines):
        try:
            wines.append(WineRecord.model_validate(raw))
        except ValidationError as e:
            logger.warning(
                "Skipping catalog entry %d: %d validation error(s): %s",
                position,
                e.error_count(),
                "; ".join(err["msg"] for err in e.errors()),
            )

    duplicates = duplicate_ids(wines)
    if duplicates:
        logger.warning(
            "Catalog repeats wine ids %s; the first entry for each id is used",
            ", ".join(duplicates),
        )

    return wines


class CatalogLoader:
    """Reads the wine list from a file path or an http(s) URL."""

    def __init__(
        self,
        source: str | Path | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.source = str(source) if source is not None else settings.catalog_source
        self.timeout = timeout if timeout is not None else settings.catalog_timeout
        self.transport = transport

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    async def fetch(self) -> Any:
        """Read and decode the raw catalog document.

        Raises:
            CatalogUnavailableError: If the source cannot be read or is not JSON.
        """
        try:
            if self.is_remote:
                async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                    response = await client.get(self.source)
                    response.raise_for_status()
                    return response.json()

            async with aiofiles.open(self.source, encoding="utf-8") as f:
                content = await f.read()
            return json.loads(content)
        except (httpx.HTTPError, OSError, ValueError, RecursionError) as e:
            raise CatalogUnavailableError(f"Cannot load catalog from {self.source}: {e}") from e

    async def load(self) -> list[WineRecord]:
        """Load the catalog, returning an empty list if it is unavailable."""
        try:
            data = await self.fetch()
        except CatalogUnavailableError as e:
            logger.error("Error loading wine data: %s", e)
            return []

        wines = parse_catalog(data)
        logger.info("Loaded %d wines from %s", len(wines), self.source)
        return wines
