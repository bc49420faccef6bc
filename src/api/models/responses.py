"""Pydantic response models for API endpoints."""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    notion_configured: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class MonthlyRange(BaseModel):
    """Window bounds reported in debug mode."""

    start: str  # UTC instant, inclusive
    end: str  # UTC instant, exclusive
    local_start: str
    local_end: str


class MatchSample(BaseModel):
    """One decoded matching page (debug mode)."""

    id: str
    title: str
    status: str
    end_date: str | None = None


class MonthlyResponse(BaseModel):
    """Monthly finished count. Fields after ``month`` only appear in debug mode."""

    count: int
    month: str  # YYYY-MM
    range: MonthlyRange | None = None
    tz_offset_minutes: int | None = None
    filter: dict[str, Any] | None = None
    pages: int | None = None
    matches: list[MatchSample] | None = None
    properties: dict[str, str] | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def error_response(
    status_code: int, error: str, code: str, details: list[str] | None = None
) -> JSONResponse:
    """JSON error response in the standard format."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, code=code, details=details or []).model_dump(),
        headers={"Cache-Control": "no-store"},
    )
