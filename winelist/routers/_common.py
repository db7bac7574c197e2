"""Shared helpers for the API routers."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from winelist.schemas.wine import WineRecord, WineType, parse_wine_type


def get_catalog(request: Request) -> list[WineRecord]:
    """The wine list loaded at startup."""
    return request.app.state.catalog


Catalog = Annotated[list[WineRecord], Depends(get_catalog)]


def require_wine_type(value: str | None) -> WineType | None:
    """Parse a ``type`` query value, rejecting unknown types.

    Raises:
        HTTPException: If the value is not a known wine type.
    """
    if not value:
        return None
    wine_type = parse_wine_type(value)
    if wine_type is None:
        allowed = ", ".join(t.value for t in WineType)
        raise HTTPException(
            status_code=422,
            detail=f"Unknown wine type '{value}'. Expected one of: {allowed}",
        )
    return wine_type
