"""Catalog use cases end to end over the fake upstream."""

from __future__ import annotations

import httpx
import pytest

from conftest import error_payload
from core.domain.errors import CatalogApiError
from core.domain.models import Character, CharacterSummary, CombatStyle
from core.domain.resource_kind import ResourceKind
from core.services.catalog_service import INVALID_LOOKUP_MESSAGE, CatalogService, build_catalog_service


class TestListAll:
    async def test_characters_across_pages(self, service: CatalogService, upstream) -> None:
        upstream.add_pages("/characters", [[4, 1], [3], [2, 5]])

        result = await service.list_characters()

        assert [c.id for c in result] == [1, 2, 3, 4, 5]
        assert all(isinstance(c, CharacterSummary) for c in result)
        assert upstream.pages_requested("/characters") == [1, 2, 3]

    async def test_combat_styles_fetch_every_page_from_their_endpoint(
        self, service: CatalogService, upstream
    ) -> None:
        upstream.add_pages("/combat-styles", [[2], [1]])
        upstream.add_pages("/characters", [[100], [200]])

        result = await service.list_combat_styles()

        assert [s.id for s in result] == [1, 2]
        assert all(isinstance(s, CombatStyle) for s in result)
        assert upstream.pages_requested("/combat-styles") == [1, 2]
        assert upstream.pages_requested("/characters") == []

    async def test_list_all_accepts_kind_values(self, service: CatalogService, upstream) -> None:
        upstream.add_pages("/combat-styles", [[1]])

        result = await service.list_all("combat-styles")

        assert [s.id for s in result] == [1]

    async def test_server_error_on_later_page_is_tolerated(self, service: CatalogService, upstream) -> None:
        upstream.add_pages("/characters", [[1], [2], [3]])
        upstream.set_page("/characters", 2, 500, error_payload(500, "Internal error"))

        result = await service.list_characters()

        assert [c.id for c in result] == [1, 3]

    async def test_connection_error_on_later_page_is_tolerated(self, service: CatalogService, upstream) -> None:
        upstream.add_pages("/characters", [[1], [2]])
        upstream.break_page("/characters", 2, httpx.ConnectError("connection refused"))

        result = await service.list_characters()

        assert [c.id for c in result] == [1]

    async def test_page_one_error_is_not_found_without_fan_out(self, service: CatalogService, upstream) -> None:
        upstream.add_pages("/characters", [[1], [2], [3]])
        upstream.set_page("/characters", 1, 503, error_payload(503, "Maintenance"))

        with pytest.raises(CatalogApiError) as info:
            await service.list_characters()

        assert info.value.status_code == 404
        assert info.value.message == "No characters found"
        assert upstream.pages_requested("/characters") == [1]

    async def test_empty_collection_is_not_found(self, service: CatalogService, upstream) -> None:
        upstream.set_page("/combat-styles", 1, 200, {"pagination": {"currentPage": 1, "totalPages": 1}, "content": []})

        with pytest.raises(CatalogApiError) as info:
            await service.list_all(ResourceKind.COMBAT_STYLES)

        assert info.value.message == "No combat styles found"

    async def test_zero_total_pages_returns_page_one(self, service: CatalogService, upstream) -> None:
        upstream.set_page(
            "/characters",
            1,
            200,
            {"pagination": {"currentPage": 1, "totalPages": 0}, "content": [{"id": 2}, {"id": 1}]},
        )

        result = await service.list_characters()

        assert [c.id for c in result] == [1, 2]
        assert upstream.pages_requested("/characters") == [1]

    async def test_twenty_pages_stay_within_five_in_flight(self, service: CatalogService, upstream) -> None:
        upstream.add_pages("/characters", [[i] for i in range(1, 21)])
        upstream.delay = 0.01

        result = await service.list_characters()

        assert [c.id for c in result] == list(range(1, 21))
        assert upstream.max_in_flight <= 5


class TestFindCharacter:
    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_missing_criteria_is_bad_request_without_request(
        self, service: CatalogService, upstream, name
    ) -> None:
        with pytest.raises(CatalogApiError) as info:
            await service.find_character(id=None, name=name)

        assert info.value.status_code == 400
        assert info.value.message == INVALID_LOOKUP_MESSAGE
        assert upstream.requests == []

    async def test_by_id(self, service: CatalogService, upstream) -> None:
        upstream.lookup = (200, {"content": [{"id": 7, "name": "Zenitsu Agatsuma", "combat_style": []}]})

        result = await service.find_character(id=7)

        assert isinstance(result, Character)
        assert result.id == 7
        assert len(upstream.requests) == 1
        assert upstream.requests[0].url.raw_path == b"/v1/characters?id=7"

    async def test_by_name(self, service: CatalogService, upstream) -> None:
        upstream.lookup = (200, {"content": [{"id": 1, "name": "Tanjiro Kamado"}, {"id": 99, "name": "other"}]})

        result = await service.find_character(name="Tanjiro Kamado")

        assert result.name == "Tanjiro Kamado"
        assert upstream.requests[0].url.raw_path == b"/v1/characters?name=Tanjiro%20Kamado"

    async def test_id_wins_over_name(self, service: CatalogService, upstream) -> None:
        upstream.lookup = (200, {"content": [{"id": 3}]})

        await service.find_character(id=3, name="Someone Else")

        assert upstream.requests[0].url.raw_path == b"/v1/characters?id=3"

    async def test_empty_content_names_the_id(self, service: CatalogService, upstream) -> None:
        upstream.lookup = (200, {"content": []})

        with pytest.raises(CatalogApiError) as info:
            await service.find_character(id=42)

        assert info.value.status_code == 404
        assert info.value.message == "Character with id 42 not found."

    async def test_empty_content_for_name_still_uses_id_template(self, service: CatalogService, upstream) -> None:
        upstream.lookup = (200, {"content": None})

        with pytest.raises(CatalogApiError) as info:
            await service.find_character(name="Tanjiro Kamado")

        assert info.value.status_code == 404
        assert info.value.message == "Character with id None not found."

    async def test_upstream_error_is_forwarded(self, service: CatalogService, upstream) -> None:
        upstream.lookup = (404, error_payload(404, "Im sorry, I couldn't find the character"))

        with pytest.raises(CatalogApiError) as info:
            await service.find_character(id=999)

        assert info.value.status_code == 404
        assert info.value.message == "Im sorry, I couldn't find the character"


async def test_build_catalog_service_uses_given_client(settings, upstream) -> None:
    upstream.add_pages("/characters", [[1]])
    client = httpx.AsyncClient(base_url=settings.base_url, transport=httpx.MockTransport(upstream.handler))

    async with build_catalog_service(settings, http_client=client) as service:
        assert [c.id for c in await service.list_characters()] == [1]

    assert client.is_closed
