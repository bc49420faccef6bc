"""
Count finished items in a Notion database for one month.

Walks the paginated query endpoint, counts matching pages and, in debug
mode, keeps a capped sample of decoded matches.
"""

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from typing import Protocol

from core.config import Settings
from core.filters import (
    DateCheck,
    FinishedFilter,
    accepts,
    build_query_filter,
    describe,
)
from core.month_window import MonthWindow
from core.properties import extract_date, extract_text, extract_title, property_types


class DatabaseQueryClient(Protocol):
    def query_database(
        self,
        database_id: str,
        query_filter: dict,
        page_size: int,
        start_cursor: str | None = None,
    ) -> dict: ...

    def retrieve_database(self, database_id: str) -> dict: ...


@dataclass
class MatchRecord:
    """Decoded debug view of one matching page."""

    id: str
    title: str
    status: str
    end_date: str | None


@dataclass
class CountResult:
    """Outcome of one counting walk."""

    count: int = 0
    pages: int = 0
    matches: list[MatchRecord] = field(default_factory=list)


def policy_from_settings(settings: Settings) -> FinishedFilter:
    """Build the filter policy selected by configuration."""
    return FinishedFilter(
        status_match=settings.status_match,
        date_check=settings.date_check,
        status_property=settings.status_property,
        end_date_property=settings.end_date_property,
        finished_marker=settings.finished_marker,
        arc_marker=settings.arc_marker,
    )


def iter_pages(
    client: DatabaseQueryClient,
    database_id: str,
    query_filter: dict,
    page_size: int,
) -> Iterator[list[dict]]:
    """
    Yield the results of each page of a database query.

    The first request carries no cursor; each later request passes the
    cursor returned by the one before. The walk ends when has_more is
    false or no cursor comes back. Errors from the client propagate.
    """
    cursor = None
    while True:
        data = client.query_database(database_id, query_filter, page_size, cursor)
        yield data.get("results") or []

        cursor = data.get("next_cursor")
        if not data.get("has_more") or not cursor:
            return


def to_match_record(page: dict, settings: Settings) -> MatchRecord:
    properties = page.get("properties") or {}
    return MatchRecord(
        id=page.get("id", ""),
        title=extract_title(page, settings.title_property),
        status=extract_text(properties.get(settings.status_property)),
        end_date=extract_date(properties.get(settings.end_date_property)),
    )


def count_finished(
    client: DatabaseQueryClient,
    settings: Settings,
    window: MonthWindow,
    debug: bool = False,
) -> CountResult:
    """
    Count finished pages in the window.

    With remote date checking every returned page counts. With local
    checking the query is broader and each page must pass ``accepts``.
    Debug only adds the match sample; it never changes the count.

    Raises:
        RemoteQueryError: if any page request fails
    """
    policy = policy_from_settings(settings)
    query_filter = build_query_filter(policy, window)
    verify_locally = policy.date_check is DateCheck.LOCAL

    result = CountResult()
    for results in iter_pages(client, settings.database_id, query_filter, settings.page_size):
        result.pages += 1
        for page in results:
            if verify_locally and not accepts(policy, window, page):
                continue
            result.count += 1
            if debug and len(result.matches) < settings.sample_limit:
                result.matches.append(to_match_record(page, settings))

    return result


def list_properties(client: DatabaseQueryClient, database_id: str) -> dict[str, str]:
    """Property names and types of the database, for schema debugging."""
    return property_types(client.retrieve_database(database_id))


def shape_result(
    result: CountResult,
    settings: Settings,
    window: MonthWindow,
    debug: bool = False,
    properties: dict[str, str] | None = None,
) -> dict:
    """
    Build the response payload.

    Normal mode returns only the count and month label. Debug mode adds the
    window bounds, offset, filter description, page count and match sample.
    """
    payload = {"count": result.count, "month": window.label}
    if not debug:
        return payload

    policy = policy_from_settings(settings)
    payload.update(
        {
            "range": {
                "start": window.start.isoformat(),
                "end": window.end.isoformat(),
                "local_start": window.local_start_date.isoformat(),
                "local_end": window.local_end_date.isoformat(),
            },
            "tz_offset_minutes": window.offset_minutes,
            "filter": {
                **describe(policy),
                "query": build_query_filter(policy, window),
            },
            "pages": result.pages,
            "matches": [asdict(match) for match in result.matches],
        }
    )
    if properties is not None:
        payload["properties"] = properties
    return payload
