"""Response bodies specific to the HTTP layer.

Catalog items are returned as the domain models themselves.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    time: datetime = Field(..., description="When the error was rendered (UTC).")
    status: int = Field(..., ge=100, le=599, description="HTTP status code.")
    message: str = Field(..., description="Human readable error message.")


class HealthResponse(BaseModel):
    status: str
    version: str
