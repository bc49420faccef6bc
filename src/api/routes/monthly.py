"""Monthly finished-count endpoint."""

import asyncio
import time
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from api.dependencies import get_notion_client, get_settings
from api.models.responses import ErrorCodes, MonthlyResponse, error_response
from api.request_log import RequestLog, log_request
from core.config import CACHE_CONTROL, CACHE_CONTROL_DEBUG, Settings
from core.exceptions import RemoteQueryError
from core.month_window import compute_month_window
from core.notion_client import NotionClient
from services.monthly import count_finished, list_properties, shape_result

router = APIRouter(prefix="/api")

MAX_TZ_OFFSET_MINUTES = 14 * 60


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def parse_int(value: str | None) -> int | None:
    """Parse an optional integer query parameter; invalid values read as absent."""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_tz_offset(value: str | None) -> int | None:
    offset = parse_int(value)
    if offset is None or abs(offset) > MAX_TZ_OFFSET_MINUTES:
        return None
    return offset


def parse_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true")


@router.get("/monthly", response_model=MonthlyResponse, response_model_exclude_none=True)
async def monthly_count(
    request: Request,
    year: Annotated[str | None, Query(description="Year override (1-9999)")] = None,
    month: Annotated[
        str | None, Query(description="Month override (1-12), requires year")
    ] = None,
    tz: Annotated[str | None, Query(description="Offset override in minutes")] = None,
    debug: Annotated[str | None, Query(description="'1' for the extended response")] = None,
    schema: Annotated[
        str | None, Query(description="'1' with debug to list database properties")
    ] = None,
    settings: Settings = Depends(get_settings),
    client: NotionClient = Depends(get_notion_client),
):
    """
    Count finished items for one month.

    Defaults to the current month in the configured offset. Invalid
    overrides are ignored rather than rejected.
    """
    start_time = time.time()
    debug_mode = parse_flag(debug)

    tz_override = parse_tz_offset(tz)
    offset = settings.tz_offset_minutes if tz_override is None else tz_override

    request_log = RequestLog(
        endpoint="/api/monthly",
        method="GET",
        client_ip=get_client_ip(request),
        tz_offset_minutes=offset,
        debug=debug_mode,
    )

    try:
        window = compute_month_window(
            datetime.now(timezone.utc), offset, parse_int(year), parse_int(month)
        )
        request_log.month = window.label

        # Blocking HTTP walk runs in the thread pool
        result = await asyncio.to_thread(
            count_finished, client, settings, window, debug_mode
        )

        properties = None
        if debug_mode and parse_flag(schema):
            properties = await asyncio.to_thread(
                list_properties, client, settings.database_id
            )

        payload = shape_result(result, settings, window, debug_mode, properties)

        request_log.status_code = 200
        request_log.count = result.count
        request_log.pages_fetched = result.pages

        return JSONResponse(
            content=MonthlyResponse(**payload).model_dump(exclude_none=True),
            headers={
                "Cache-Control": CACHE_CONTROL_DEBUG if debug_mode else CACHE_CONTROL
            },
        )

    except RemoteQueryError as e:
        # Passed through unchanged by the app-level handler
        request_log.status_code = e.status_code
        request_log.error_message = str(e)
        raise

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        return error_response(500, str(e), ErrorCodes.INTERNAL_ERROR)

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        try:
            log_request(request_log)
        except Exception:
            # Don't fail the request if logging fails
            pass
