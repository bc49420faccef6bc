"""
Configuration constants and environment setup.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from core.exceptions import ConfigurationError
from core.filters import DateCheck, StatusMatch

load_dotenv()

# =============================================================================
# NOTION API
# =============================================================================

NOTION_API_BASE = os.environ.get("NOTION_API_BASE", "https://api.notion.com/v1")
NOTION_VERSION = "2022-06-28"
NOTION_TIMEOUT_SECONDS = float(os.environ.get("NOTION_TIMEOUT_SECONDS", "30"))
MAX_PAGE_SIZE = 100  # Notion rejects larger pages

# =============================================================================
# COUNTER DEFAULTS
# =============================================================================

DEFAULT_TZ_OFFSET_MINUTES = -480  # Pacific standard time
DEFAULT_END_DATE_PROPERTY = "End Date"
DEFAULT_STATUS_PROPERTY = "Status"
DEFAULT_TITLE_PROPERTY = "Name"
DEFAULT_FINISHED_MARKER = "📘"
DEFAULT_ARC_MARKER = "📘✨ ARC"
DEFAULT_STATUS_MATCH = StatusMatch.CONTAINS
DEFAULT_DATE_CHECK = DateCheck.REMOTE
DEFAULT_SAMPLE_LIMIT = 10

# =============================================================================
# RESPONSE CACHING
# =============================================================================

CACHE_CONTROL = "s-maxage=60, stale-while-revalidate=120"
CACHE_CONTROL_DEBUG = "no-store"

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
API_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    """Per-request counter settings, built once from the environment."""

    api_token: str
    database_id: str
    tz_offset_minutes: int = DEFAULT_TZ_OFFSET_MINUTES
    end_date_property: str = DEFAULT_END_DATE_PROPERTY
    status_property: str = DEFAULT_STATUS_PROPERTY
    title_property: str = DEFAULT_TITLE_PROPERTY
    status_match: StatusMatch = DEFAULT_STATUS_MATCH
    date_check: DateCheck = DEFAULT_DATE_CHECK
    finished_marker: str = DEFAULT_FINISHED_MARKER
    arc_marker: str = DEFAULT_ARC_MARKER
    page_size: int = MAX_PAGE_SIZE
    sample_limit: int = DEFAULT_SAMPLE_LIMIT


def _first(environ: Mapping[str, str], *names: str) -> str:
    """Return the first non-blank value among the given variable names."""
    for name in names:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return ""


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'")


def _enum_setting(environ: Mapping[str, str], name: str, enum_cls, default):
    raw = (environ.get(name) or "").strip().lower()
    if not raw:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(f"{name} must be one of: {choices}; got '{raw}'")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from an environment mapping.

    Raises:
        ConfigurationError: if the token or database ID is missing, or an
            optional value cannot be parsed
    """
    if environ is None:
        environ = os.environ

    api_token = _first(environ, "API_TOKEN", "NOTION_TOKEN")
    database_id = _first(environ, "DATABASE_ID", "NOTION_DATABASE_ID")
    if not api_token or not database_id:
        raise ConfigurationError("Missing Notion env vars")

    page_size = _int_setting(environ, "PAGE_SIZE", MAX_PAGE_SIZE)

    return Settings(
        api_token=api_token,
        database_id=database_id,
        tz_offset_minutes=_int_setting(
            environ, "TZ_OFFSET_MINUTES", DEFAULT_TZ_OFFSET_MINUTES
        ),
        end_date_property=_first(environ, "END_DATE_PROPERTY_NAME")
        or DEFAULT_END_DATE_PROPERTY,
        status_property=_first(environ, "STATUS_PROPERTY_NAME")
        or DEFAULT_STATUS_PROPERTY,
        title_property=_first(environ, "TITLE_PROPERTY_NAME") or DEFAULT_TITLE_PROPERTY,
        status_match=_enum_setting(
            environ, "STATUS_MATCH", StatusMatch, DEFAULT_STATUS_MATCH
        ),
        date_check=_enum_setting(environ, "DATE_CHECK", DateCheck, DEFAULT_DATE_CHECK),
        finished_marker=_first(environ, "FINISHED_MARKER") or DEFAULT_FINISHED_MARKER,
        arc_marker=_first(environ, "ARC_MARKER") or DEFAULT_ARC_MARKER,
        page_size=min(max(page_size, 1), MAX_PAGE_SIZE),
        sample_limit=max(
            _int_setting(environ, "DEBUG_SAMPLE_LIMIT", DEFAULT_SAMPLE_LIMIT), 0
        ),
    )
