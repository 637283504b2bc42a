"""Application factory.

Wires together:
- the shared `CatalogService` (built in the lifespan, closed on shutdown)
- error handlers
- routers

No catalog logic belongs here.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import APIRouter, FastAPI

from api.errors import register_error_handlers
from api.routes import router as catalog_router
from api.schemas import HealthResponse
from core.config import AppSettings, get_settings
from core.logging import configure_logging
from core.services.catalog_service import build_catalog_service

__version__ = "0.1.0"

health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the process-wide settings.
    """

    settings = settings or get_settings()
    configure_logging(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        service = build_catalog_service(settings)
        app.state.catalog_service = service
        try:
            yield
        finally:
            await service.aclose()

    app = FastAPI(title="ds-catalog", version=__version__, lifespan=lifespan)
    register_error_handlers(app)
    app.include_router(health_router, prefix="/api")
    app.include_router(catalog_router, prefix="/api")
    return app
