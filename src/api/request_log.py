"""Structured request logging for API."""

import json
import logging
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

logger = logging.getLogger("api.requests")


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    month: str | None = None
    tz_offset_minutes: int | None = None
    debug: bool = False
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    count: int | None = None
    pages_fetched: int | None = None


def log_request(log: RequestLog) -> None:
    """Emit the request log as one JSON line."""
    level = logging.INFO if log.status_code < 400 else logging.WARNING
    logger.log(level, json.dumps(asdict(log), ensure_ascii=False))
