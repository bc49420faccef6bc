"""API Pydantic models."""

from .responses import (
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
    MonthlyResponse,
    error_response,
)

__all__ = [
    "HealthResponse",
    "MonthlyResponse",
    "ErrorResponse",
    "ErrorCodes",
    "error_response",
]
