"""Shared fixtures: an in-memory upstream served through `httpx.MockTransport`."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest
import pytest_asyncio

from adapters.catalog_api import CatalogApiClient
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.services.catalog_service import CatalogService

BASE_URL = "https://api.test/v1"
BASE_PATH = "/v1"


def character(id: int, **extra: Any) -> dict[str, Any]:
    return {
        "id": id,
        "name": f"Character {id}",
        "gender": "Male",
        "race": "Human",
        "description": f"Description of character {id}",
        "img": f"https://img.test/{id}.png",
        "quote": "fields the model does not know are ignored",
        **extra,
    }


def page_payload(page: int, total_pages: int, ids: list[int]) -> dict[str, Any]:
    return {
        "pagination": {
            "currentPage": page,
            "totalPages": total_pages,
            "totalElements": 999,
            "nextPage": None,
        },
        "content": [character(i) for i in ids],
    }


def error_payload(status: int, message: str) -> dict[str, Any]:
    return {"error": {"status": status, "message": message}}


class UpstreamStub:
    """Fake Demon Slayer API.

    Pages are registered per path; lookups (no `page` param) return whatever
    `lookup` holds. Every request is recorded and concurrency is tracked.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.delay = 0.0
        self.lookup: tuple[int, Any] = (200, {"content": []})
        self._pages: dict[tuple[str, int], tuple[int, Any]] = {}
        self._slow: dict[tuple[str, int], float] = {}
        self._broken: dict[tuple[str, int], Exception] = {}

    def add_pages(self, path: str, pages: list[list[int]]) -> None:
        for number, ids in enumerate(pages, start=1):
            self._pages[(path, number)] = (200, page_payload(number, len(pages), ids))

    def set_page(self, path: str, page: int, status: int, payload: Any) -> None:
        self._pages[(path, page)] = (status, payload)

    def slow_page(self, path: str, page: int, seconds: float) -> None:
        self._slow[(path, page)] = seconds

    def break_page(self, path: str, page: int, exc: Exception) -> None:
        self._broken[(path, page)] = exc

    def pages_requested(self, path: str) -> list[int]:
        return sorted(
            int(r.url.params["page"])
            for r in self.requests
            if r.url.path == BASE_PATH + path and "page" in r.url.params
        )

    @staticmethod
    def _response(status: int, payload: Any) -> httpx.Response:
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status, content=payload)
        return httpx.Response(status, json=payload)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            path = request.url.path.removeprefix(BASE_PATH)
            if "page" not in request.url.params:
                return self._response(*self.lookup)

            key = (path, int(request.url.params["page"]))
            await asyncio.sleep(self._slow.get(key, self.delay))
            if key in self._broken:
                raise self._broken[key]
            status, payload = self._pages.get(key, (404, error_payload(404, "Page not found")))
            return self._response(status, payload)
        finally:
            self.in_flight -= 1


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        base_url=BASE_URL,
        character_endpoint="/characters",
        combat_style_endpoint="/combat-styles",
        http_timeout_seconds=2.0,
    )


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


def make_http_client(settings: AppSettings, upstream: UpstreamStub) -> httpx.AsyncClient:
    return build_async_client(settings, transport=httpx.MockTransport(upstream.handler))


@pytest_asyncio.fixture
async def api_client(settings: AppSettings, upstream: UpstreamStub):
    client = CatalogApiClient(settings, http_client=make_http_client(settings, upstream))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def service(settings: AppSettings, upstream: UpstreamStub):
    gateway = CatalogApiClient(settings, http_client=make_http_client(settings, upstream))
    async with CatalogService(gateway, settings) as svc:
        yield svc
