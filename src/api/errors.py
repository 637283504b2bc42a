"""Error handlers for FastAPI.

- `CatalogApiError` keeps its own status and message.
- Anything else is a 500 with a generic message; details only go to the log.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.schemas import ErrorResponse
from core.domain.errors import CatalogApiError

logger = logging.getLogger(__name__)


def error_response(status: HTTPStatus | int, message: str) -> JSONResponse:
    """Build a JSON error body `{time, status, message}`."""

    status_code = int(status)
    body = ErrorResponse(time=datetime.now(timezone.utc), status=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain and catch-all error handlers on `app`."""

    @app.exception_handler(CatalogApiError)
    async def handle_catalog_error(_request: Request, exc: CatalogApiError) -> JSONResponse:
        logger.info("Catalog error %d: %s", exc.status_code, exc.message)
        return error_response(exc.status, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error")
