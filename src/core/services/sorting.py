"""Ordering helpers for catalog items."""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar

from core.interfaces.catalog import Identifiable

IdentifiableT = TypeVar("IdentifiableT", bound=Identifiable)


class _Named(Protocol):
    @property
    def name(self) -> str | None: ...


NamedT = TypeVar("NamedT", bound=_Named)


def sort_by_id(items: Iterable[IdentifiableT]) -> list[IdentifiableT]:
    """Return a new list ordered by ascending `id`.

    `sorted` is stable: equal ids keep their input order.
    """

    return sorted(items, key=lambda item: item.id)


def sort_by_name(items: Iterable[NamedT]) -> list[NamedT]:
    """Return a new list ordered by name, case-insensitively (missing names last)."""

    return sorted(items, key=lambda item: (item.name is None, (item.name or "").casefold()))
