"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION, load_settings
from core.exceptions import ConfigurationError

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if the Notion credentials are configured, 503 otherwise.
    No call is made to Notion.
    """
    timestamp = datetime.now(timezone.utc).isoformat()

    try:
        load_settings()
    except ConfigurationError as e:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                notion_configured=False,
                timestamp=timestamp,
                error=str(e),
            ).model_dump(),
        )

    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        notion_configured=True,
        timestamp=timestamp,
    )
