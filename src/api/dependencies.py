"""FastAPI dependencies.

The `CatalogService` is built once in the app lifespan and shared by every
request; it carries no per-request state.
"""

from __future__ import annotations

from fastapi import Request

from core.services.catalog_service import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service
