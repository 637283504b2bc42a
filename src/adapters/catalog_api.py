"""Upstream catalog client (Demon Slayer API).

Two operations, both pure I/O:
- `fetch_page`: one page of a paged resource (`?page=N&limit=10`).
- `fetch_character`: the `?id=` / `?name=` lookup.

4xx/5xx responses never decode as success; they are raised as
`CatalogApiError` through `adapters.error_translator`. A 2xx body that is not
the expected JSON is raised as a 502 `CatalogApiError` too.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TypeVar
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel

from adapters.error_translator import translate_error
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import CatalogApiError
from core.domain.models import CharacterLookup, PageEnvelope

logger = logging.getLogger(__name__)

# Fixed by the upstream API contract.
PAGE_SIZE = 10

MALFORMED_RESPONSE_ERROR = "Malformed response from upstream"

PageT = TypeVar("PageT", bound=PageEnvelope)
ModelT = TypeVar("ModelT", bound=BaseModel)


def _decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
    try:
        payload = response.json() if response.content else None
        return model.model_validate(payload or {})
    except ValueError as exc:
        # JSONDecodeError and pydantic's ValidationError are both ValueErrors.
        logger.debug("Undecodable %s body from %s: %s", model.__name__, response.request.url, exc)
        raise CatalogApiError(MALFORMED_RESPONSE_ERROR, HTTPStatus.BAD_GATEWAY) from exc


class CatalogApiClient:
    """httpx implementation of `core.interfaces.catalog.CatalogGateway`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = http_client or build_async_client(self._settings)

    async def _get(self, endpoint: str, params: dict[str, object]) -> httpx.Response:
        # Spaces travel as %20, not "+".
        url = f"{endpoint}?{urlencode(params, quote_via=quote)}"
        response = await self._client.get(url)
        if response.is_client_error or response.is_server_error:
            raise translate_error(response.status_code, response.content)
        return response

    async def fetch_page(self, endpoint: str, page_number: int, page_model: type[PageT]) -> PageT:
        if not endpoint:
            raise ValueError("endpoint must not be empty")
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")

        response = await self._get(endpoint, {"page": page_number, "limit": PAGE_SIZE})
        logger.debug("Fetched %s page %d (HTTP %d)", endpoint, page_number, response.status_code)
        return _decode(response, page_model)

    async def fetch_character(self, *, id: int | None = None, name: str | None = None) -> CharacterLookup:
        params: dict[str, object] = {"id": id} if id is not None else {"name": name}
        response = await self._get(self._settings.character_endpoint, params)
        return _decode(response, CharacterLookup)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> CatalogApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
