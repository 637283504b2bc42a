"""Contracts between the catalog core and its upstream transport.

`CatalogGateway` is what the aggregator and the resolver need from the
network: fetch one page, look up one character. The httpx implementation
lives in `adapters.catalog_api`; tests can pass any object with these methods.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from core.domain.models import CharacterLookup, PageEnvelope

PageT = TypeVar("PageT", bound=PageEnvelope)


@runtime_checkable
class Identifiable(Protocol):
    """An item with an upstream-assigned integer identifier."""

    @property
    def id(self) -> int: ...


@runtime_checkable
class CatalogGateway(Protocol):
    """Minimal upstream contract.

    Design rules:
    - Methods are async: every call is HTTP I/O.
    - Failures surface as `core.domain.errors.CatalogApiError`.
    """

    async def fetch_page(self, endpoint: str, page_number: int, page_model: type[PageT]) -> PageT:
        """Fetch and decode one page of `endpoint`."""

        ...

    async def fetch_character(self, *, id: int | None = None, name: str | None = None) -> CharacterLookup:
        """Look up characters by `id` (preferred) or `name`."""

        ...

    async def aclose(self) -> None:
        """Release the underlying connections."""

        ...
