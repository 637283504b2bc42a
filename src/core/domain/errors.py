"""Domain error raised across the catalog boundary.

`CatalogApiError` carries everything the routing layer needs to render an
error response: a message and an HTTP status.
"""

from __future__ import annotations

from http import HTTPStatus


class CatalogApiError(Exception):
    """Typed failure of a catalog operation (validation, not found, upstream)."""

    def __init__(self, message: str, status: HTTPStatus | int) -> None:
        super().__init__(message)
        self._message = message
        self._status = HTTPStatus(status)

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> HTTPStatus:
        return self._status

    @property
    def status_code(self) -> int:
        return self._status.value

    def __repr__(self) -> str:
        return f"CatalogApiError(message={self._message!r}, status={self._status.value})"
