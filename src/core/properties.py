"""
Read values out of raw Notion page properties.
"""

from datetime import datetime, timedelta, timezone
from typing import Any


def plain_text(parts: list[dict] | None) -> str:
    """Join the plain_text of a rich_text/title array."""
    if not parts:
        return ""
    return "".join(part.get("plain_text") or "" for part in parts)


def extract_text(prop: dict | None) -> str:
    """
    Text value of a property, whatever its type.

    Handles rich_text, title, select, status and string formulas. Other
    types read as an empty string.
    """
    if not prop:
        return ""
    prop_type = prop.get("type")
    if prop_type in ("rich_text", "title"):
        return plain_text(prop.get(prop_type))
    if prop_type in ("select", "status"):
        option = prop.get(prop_type) or {}
        return option.get("name") or ""
    if prop_type == "formula":
        formula = prop.get("formula") or {}
        return formula.get("string") or ""
    return ""


def extract_date(prop: dict | None) -> str | None:
    """Raw ``date.start`` string of a date property, or None when empty."""
    if not prop:
        return None
    value = prop.get("date") or {}
    return value.get("start")


def extract_title(page: dict, title_property: str) -> str:
    """
    Title of a page.

    Uses the configured property name first. When the page has no such
    property, falls back to the first property whose type is ``title``
    (every Notion database has exactly one).
    """
    properties = page.get("properties") or {}
    prop = properties.get(title_property)
    if prop is None:
        prop = next(
            (p for p in properties.values() if p.get("type") == "title"),
            None,
        )
    return extract_text(prop)


def parse_notion_date(value: str | None, offset_minutes: int) -> datetime | None:
    """
    Convert a Notion date string to a UTC instant.

    Timestamps carrying their own offset are parsed as-is. Naive timestamps
    and date-only values are read in the local offset, date-only values as
    local midnight.

    Returns:
        Aware UTC datetime, or None when the value is empty or unparseable
    """
    if not value:
        return None
    local_tz = timezone(timedelta(minutes=offset_minutes))
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=local_tz)
    return parsed.astimezone(timezone.utc)


def property_types(database: dict[str, Any]) -> dict[str, str]:
    """Map property name to type from a database metadata object."""
    properties = database.get("properties") or {}
    return {name: prop.get("type", "") for name, prop in sorted(properties.items())}
