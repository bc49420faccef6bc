"""
Finished-item filter policies.

A policy combines how the status text is matched (StatusMatch) with where
the end-date check happens (DateCheck). The remote filter body is what gets
sent to the Notion query endpoint; ``accepts`` is the local check applied to
each returned page when dates are verified locally.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from core.month_window import MonthWindow
from core.properties import extract_date, extract_text, parse_notion_date


class StatusMatch(str, Enum):
    """How the status text is compared with the finished marker."""

    EQUALS = "equals"
    STARTS_WITH = "starts_with"
    CONTAINS = "contains"
    FINISHED_OR_ARC = "finished_or_arc"  # equals finished OR starts with ARC


class DateCheck(str, Enum):
    """Where the end-date window check runs."""

    REMOTE = "remote"
    LOCAL = "local"


@dataclass(frozen=True)
class FinishedFilter:
    """Filter policy for finished items."""

    status_match: StatusMatch
    date_check: DateCheck
    status_property: str
    end_date_property: str
    finished_marker: str
    arc_marker: str


def _status_clause(policy: FinishedFilter) -> dict:
    prop = policy.status_property
    if policy.status_match is StatusMatch.FINISHED_OR_ARC:
        return {
            "or": [
                {"property": prop, "rich_text": {"equals": policy.finished_marker}},
                {"property": prop, "rich_text": {"starts_with": policy.arc_marker}},
            ]
        }
    return {
        "property": prop,
        "rich_text": {policy.status_match.value: policy.finished_marker},
    }


def _date_bounds(policy: FinishedFilter, window: MonthWindow) -> tuple[str, str]:
    if policy.date_check is DateCheck.REMOTE:
        # Local calendar dates; date-only end dates compare as whole days
        return window.local_start_date.isoformat(), window.local_end_date.isoformat()

    # Padded by a day on each side so every offset's boundary records come
    # back; the exact check runs in accepts()
    lower = max(window.local_start_date, date.min + timedelta(days=1)) - timedelta(days=1)
    upper = window.local_end_date + timedelta(days=1)
    return lower.isoformat(), upper.isoformat()


def build_query_filter(policy: FinishedFilter, window: MonthWindow) -> dict:
    """Build the Notion query filter body for a policy and month window."""
    on_or_after, before = _date_bounds(policy, window)
    return {
        "and": [
            _status_clause(policy),
            {"property": policy.end_date_property, "date": {"on_or_after": on_or_after}},
            {"property": policy.end_date_property, "date": {"before": before}},
        ]
    }


def status_matches(policy: FinishedFilter, status: str) -> bool:
    """Apply the status policy to a status string."""
    marker = policy.finished_marker
    if policy.status_match is StatusMatch.EQUALS:
        return status == marker
    if policy.status_match is StatusMatch.STARTS_WITH:
        return status.startswith(marker)
    if policy.status_match is StatusMatch.CONTAINS:
        return marker in status
    return status == marker or status.startswith(policy.arc_marker)


def accepts(policy: FinishedFilter, window: MonthWindow, page: dict) -> bool:
    """
    Local accept function for a raw Notion page.

    A page is accepted when its status matches the policy and its end date
    falls inside the window. Pages without an end date are never accepted.
    """
    properties = page.get("properties") or {}
    status = extract_text(properties.get(policy.status_property))
    if not status_matches(policy, status):
        return False

    end = parse_notion_date(
        extract_date(properties.get(policy.end_date_property)),
        window.offset_minutes,
    )
    return end is not None and window.contains(end)


def describe(policy: FinishedFilter) -> dict:
    """Readable summary of the applied policy for debug output."""
    if policy.status_match is StatusMatch.FINISHED_OR_ARC:
        status_rule = (
            f"{policy.status_property} equals '{policy.finished_marker}' "
            f"or starts with '{policy.arc_marker}'"
        )
    else:
        verb = policy.status_match.value.replace("_", " ")
        status_rule = f"{policy.status_property} {verb} '{policy.finished_marker}'"

    return {
        "status_match": policy.status_match.value,
        "date_check": policy.date_check.value,
        "status_rule": status_rule,
        "date_rule": f"{policy.end_date_property} within month window",
    }
