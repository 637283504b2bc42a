"""Catalog use cases.

Entry point for the HTTP layer and the CLI:
- `list_all(kind)`: every item of a paged collection, sorted by id.
- `find_character(id=..., name=...)`: one character by exact id or name.

The service holds no per-request state; the only thing it keeps is the
gateway (and through it the immutable settings).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus

import httpx

from adapters.catalog_api import CatalogApiClient
from core.config import AppSettings
from core.domain.errors import CatalogApiError
from core.domain.models import (
    Character,
    CharacterPage,
    CharacterSummary,
    CombatStyle,
    CombatStylePage,
    PageEnvelope,
)
from core.domain.resource_kind import ResourceKind
from core.interfaces.catalog import CatalogGateway
from core.services.aggregator import aggregate_pages

logger = logging.getLogger(__name__)

INVALID_LOOKUP_MESSAGE = "Provide exactly one of 'id' or 'name'"


@dataclass(frozen=True)
class _Collection:
    endpoint: str
    page_model: type[PageEnvelope]
    label: str


class CatalogService:
    """Read-only facade over the upstream catalog."""

    def __init__(self, gateway: CatalogGateway, settings: AppSettings) -> None:
        self._gateway = gateway
        self._collections = {
            ResourceKind.CHARACTERS: _Collection(
                settings.character_endpoint, CharacterPage, ResourceKind.CHARACTERS.label()
            ),
            ResourceKind.COMBAT_STYLES: _Collection(
                settings.combat_style_endpoint, CombatStylePage, ResourceKind.COMBAT_STYLES.label()
            ),
        }

    async def list_all(self, kind: ResourceKind) -> list:
        collection = self._collections[ResourceKind(kind)]

        async def fetch(page_number: int) -> PageEnvelope:
            return await self._gateway.fetch_page(collection.endpoint, page_number, collection.page_model)

        return await aggregate_pages(fetch_page=fetch, resource=collection.label)

    async def list_characters(self) -> list[CharacterSummary]:
        return await self.list_all(ResourceKind.CHARACTERS)

    async def list_combat_styles(self) -> list[CombatStyle]:
        return await self.list_all(ResourceKind.COMBAT_STYLES)

    async def find_character(self, id: int | None = None, name: str | None = None) -> Character:
        """Resolve one character; `id` wins when both are given.

        Raises:
            CatalogApiError: 400 when neither a usable id nor name is given,
                404 when the lookup comes back empty, or the upstream error.
        """

        if id is None and (name is None or not name.strip()):
            raise CatalogApiError(INVALID_LOOKUP_MESSAGE, HTTPStatus.BAD_REQUEST)
        if id is not None and name:
            logger.debug("Both id and name given; looking up by id=%s", id)

        lookup = await self._gateway.fetch_character(id=id, name=None if id is not None else name)
        if not lookup.content:
            # Message names the id even for name lookups.
            raise CatalogApiError(f"Character with id {id} not found.", HTTPStatus.NOT_FOUND)
        return lookup.content[0]

    async def aclose(self) -> None:
        await self._gateway.aclose()

    async def __aenter__(self) -> CatalogService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def build_catalog_service(
    settings: AppSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> CatalogService:
    """Wire the httpx gateway into a `CatalogService`."""

    settings = settings or AppSettings()
    return CatalogService(CatalogApiClient(settings, http_client=http_client), settings)
