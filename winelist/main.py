"""FastAPI application entry point for WineList."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from winelist import __version__
from winelist.config import settings
from winelist.services.catalog import CatalogLoader

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the wine list once at startup."""
    app.state.catalog = await CatalogLoader().load()
    if not app.state.catalog:
        logger.warning("Serving an empty wine list")

    yield


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Digital wine list: browse wines by type, region and name",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.catalog = []

    # Only allow origins from the whitelist; empty list means same-origin only
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=["Content-Type"],
            max_age=600,
        )

    app.add_middleware(SecurityHeadersMiddleware)

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request) -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse(
            content={
                "status": "healthy",
                "version": __version__,
                "app_name": settings.app_name,
                "wines_loaded": len(request.app.state.catalog),
            }
        )

    from winelist.routers import pages, regions, wines

    app.include_router(wines.router, prefix="/api/wines", tags=["Wines"])
    app.include_router(regions.router, prefix="/api/regions", tags=["Regions"])
    app.include_router(pages.router, prefix="/api/pages", tags=["Pages"])

    return app


app = create_app()
