"""FastAPI application factory for pivotorder."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from pivotorder import __version__
from pivotorder.api.middleware import SortTimingMiddleware
from pivotorder.api.routers import sort
from pivotorder.api.schemas import HealthResponse
from pivotorder.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="pivotorder",
        description="Orders the row and column dimension values of pivot views.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(SortTimingMiddleware)

    app.include_router(sort.router, prefix="/sort", tags=["sort"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("pivotorder.api")
    logger.info(
        "pivotorder API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "pivotorder.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
