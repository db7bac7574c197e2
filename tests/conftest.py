"""Pytest configuration and fixtures for WineList tests."""

import json
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from winelist.schemas.wine import WineRecord

SAMPLE_WINES = [
    {
        "wine_number": "1",
        "wine_name": "Chianti Classico",
        "wine_type": "ROSSO",
        "region": "TOSCANA",
        "varietals": "Sangiovese",
        "wine_description": "Cherry and violet.",
        "wine_vintage": "2018 Riserva",
        "wine_price": 25,
        "alcohol": "13.5%",
        "aging": "12 months in oak",
    },
    {
        "wine_number": "2",
        "wine_name": "Pinot Grigio",
        "wine_type": "BIANCO",
        "region": "VENETO",
        "varietals": "Pinot Grigio",
        "wine_vintage": "2022",
        "wine_price": 18,
    },
    {
        "wine_number": "3",
        "wine_name": "Barolo",
        "wine_type": "ROSSO",
        "region": "PIEMONTE",
        "varietals": "Nebbiolo",
        "wine_vintage": "Barrel Reserve",
        "wine_price": 90.5,
    },
    {
        "wine_number": "4",
        "wine_name": "Brunello di Montalcino",
        "wine_type": "ROSSO",
        "region": "TOSCANA",
        "wine_price": 110,
    },
    {
        "wine_number": "5",
        "wine_name": "Prosecco",
        "wine_type": "BOLLICINE",
        "region": "VENETO",
        "varietals": "Glera",
        "wine_price": 30,
    },
    {
        "wine_number": "6",
        "wine_name": "House Rosato",
        "wine_type": "ROSATO",
        "region": "",
        "wine_price": 12,
    },
]


@pytest.fixture
def sample_documents() -> list[dict]:
    """Raw catalog entries as they appear in the list file."""
    return [dict(doc) for doc in SAMPLE_WINES]


@pytest.fixture
def catalog(sample_documents) -> list[WineRecord]:
    """The sample wine list as records."""
    return [WineRecord.model_validate(doc) for doc in sample_documents]


@pytest.fixture
def catalog_file(tmp_path: Path, sample_documents) -> Path:
    """The sample wine list written to a JSON file."""
    path = tmp_path / "wines.json"
    path.write_text(json.dumps({"wines": sample_documents}), encoding="utf-8")
    return path


@pytest.fixture
def make_wine():
    """Factory for single wine records with sensible defaults."""

    def _make(wine_id: str = "W1", **fields) -> WineRecord:
        data = {"id": wine_id, "name": f"Wine {wine_id}", "type": "RED", "price": 20}
        data.update(fields)
        return WineRecord.model_validate(data)

    return _make


@pytest_asyncio.fixture(scope="function")
async def client(catalog) -> AsyncGenerator[AsyncClient, None]:
    """Async client against the API with the sample list loaded.

    ASGITransport does not run the lifespan, so the catalog is set directly.
    """
    from winelist.main import create_app

    app = create_app()
    app.state.catalog = catalog
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def empty_client() -> AsyncGenerator[AsyncClient, None]:
    """Async client against the API with nothing loaded."""
    from winelist.main import create_app

    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
