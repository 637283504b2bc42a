"""Catalog routes.

Thin adapters from HTTP to `CatalogService`. Errors propagate as
`CatalogApiError` and are rendered by `api.errors`.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service
from api.schemas import ErrorResponse
from core.domain.models import Character, CharacterSummary, CombatStyle
from core.services.catalog_service import CatalogService
from core.services.sorting import sort_by_name

router = APIRouter(tags=["catalog"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get(
    "/characters",
    response_model=list[CharacterSummary],
    responses=_ERRORS,
    summary="List every character",
)
async def list_characters(
    sort: Literal["id", "name"] = Query(default="id", description="Order of the result."),
    service: CatalogService = Depends(get_catalog_service),
) -> list[CharacterSummary]:
    characters = await service.list_characters()
    return sort_by_name(characters) if sort == "name" else characters


@router.get(
    "/characters/search",
    response_model=Character,
    responses=_ERRORS,
    summary="Find one character by id or name",
)
async def search_character(
    id: int | None = Query(default=None),
    name: str | None = Query(default=None),
    service: CatalogService = Depends(get_catalog_service),
) -> Character:
    return await service.find_character(id=id, name=name)


@router.get(
    "/characters/{id}",
    response_model=Character,
    responses=_ERRORS,
    summary="Get one character by id",
)
async def get_character(
    id: int,
    service: CatalogService = Depends(get_catalog_service),
) -> Character:
    return await service.find_character(id=id)


@router.get(
    "/combat-styles",
    response_model=list[CombatStyle],
    responses=_ERRORS,
    summary="List every combat style",
)
async def list_combat_styles(
    service: CatalogService = Depends(get_catalog_service),
) -> list[CombatStyle]:
    return await service.list_combat_styles()
