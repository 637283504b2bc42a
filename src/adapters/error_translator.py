"""Upstream error translation.

The upstream API reports failures as::

    {"error": {"status": 404, "message": "I'm sorry, I couldn't find the character"}}

`translate_error` turns any 4xx/5xx body into a `CatalogApiError`, keeping the
upstream status code verbatim.
"""

from __future__ import annotations

import json
import logging
from http import HTTPStatus

from core.domain.errors import CatalogApiError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"
INVALID_JSON_ERROR = "Unknown error (invalid JSON response)"


def _as_status(status_code: int) -> HTTPStatus:
    try:
        return HTTPStatus(status_code)
    except ValueError:
        # Non-standard codes (e.g. 599) cannot be enumerated.
        return HTTPStatus.BAD_GATEWAY


def translate_error(status_code: int, body: str | bytes | None) -> CatalogApiError:
    """Build the domain error for an upstream failure response."""

    status = _as_status(status_code)
    try:
        payload = json.loads(body or "")
    except (ValueError, TypeError):
        logger.debug("Upstream %s returned a non-JSON error body", status_code)
        return CatalogApiError(INVALID_JSON_ERROR, status)

    message = UNKNOWN_ERROR
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            extracted = error.get("message")
            if isinstance(extracted, str):
                message = extracted
            elif isinstance(extracted, (int, float, bool)):
                # Scalars keep their JSON spelling: 123, 1.5, true.
                message = json.dumps(extracted)

    logger.debug("Upstream %s translated to %r", status_code, message)
    return CatalogApiError(message, status)
