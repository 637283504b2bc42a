"""Paginated aggregation.

Collects every page of a paged upstream resource into one list:

1. Page 1 is awaited first. It decides whether the resource exists and how
   many pages there are, so its failure (or an empty page 1) is fatal.
2. Pages 2..N are fetched concurrently, at most `MAX_CONCURRENT_PAGES` at a
   time, each bounded by `PAGE_TIMEOUT_SECONDS`. A page that fails or times
   out contributes nothing; the aggregation carries on.
3. Everything retrieved is merged and sorted by ascending id.

The function takes a `fetch_page(page_number)` callable instead of a client,
so the same orchestration serves every resource type.
"""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from typing import Awaitable, Callable, Sequence

from core.domain.errors import CatalogApiError
from core.domain.models import PageEnvelope
from core.services.sorting import sort_by_id

logger = logging.getLogger(__name__)

MAX_CONCURRENT_PAGES = 5
PAGE_TIMEOUT_SECONDS = 5.0

PageFetcher = Callable[[int], Awaitable[PageEnvelope]]


def not_found(resource: str) -> CatalogApiError:
    return CatalogApiError(f"No {resource} found", HTTPStatus.NOT_FOUND)


async def _fetch_first_page(fetch_page: PageFetcher, resource: str) -> PageEnvelope:
    try:
        first = await fetch_page(1)
    except Exception as exc:
        logger.info("Page 1 of %s failed: %s", resource, exc)
        raise not_found(resource) from exc

    if first is None or not first.content:
        logger.info("Page 1 of %s is empty", resource)
        raise not_found(resource)
    return first


async def _fetch_remaining_page(
    fetch_page: PageFetcher,
    page_number: int,
    *,
    resource: str,
    semaphore: asyncio.Semaphore,
    timeout: float,
) -> Sequence:
    async with semaphore:
        try:
            page = await asyncio.wait_for(fetch_page(page_number), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Page %d of %s timed out after %.1fs; skipped", page_number, resource, timeout)
            return []
        except Exception as exc:
            logger.warning("Page %d of %s failed (%s); skipped", page_number, resource, exc)
            return []
    return page.content if page is not None else []


async def aggregate_pages(
    *,
    fetch_page: PageFetcher,
    resource: str,
    max_concurrency: int = MAX_CONCURRENT_PAGES,
    page_timeout: float = PAGE_TIMEOUT_SECONDS,
) -> list:
    """Fetch all pages of a resource and return their items sorted by id.

    Raises:
        CatalogApiError: 404 "No {resource} found" when page 1 fails or is empty.
    """

    first = await _fetch_first_page(fetch_page, resource)
    total_pages = first.pagination.total_pages if first.pagination is not None else 1
    if total_pages <= 1:
        return sort_by_id(first.content)

    semaphore = asyncio.Semaphore(max(1, max_concurrency))
    remaining = await asyncio.gather(
        *(
            _fetch_remaining_page(
                fetch_page,
                page_number,
                resource=resource,
                semaphore=semaphore,
                timeout=page_timeout,
            )
            for page_number in range(2, total_pages + 1)
        )
    )

    # gather keeps page order, so equal ids stay in page-then-position order.
    items = list(first.content)
    for content in remaining:
        items.extend(content)

    retrieved = 1 + sum(1 for content in remaining if content)
    logger.debug("Aggregated %d %s (%d of %d pages non-empty)", len(items), resource, retrieved, total_pages)
    return sort_by_id(items)
