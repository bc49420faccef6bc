"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import Settings  # noqa: E402
from core.exceptions import RemoteQueryError  # noqa: E402


class FakeNotionClient:
    """
    Stand-in for NotionClient that serves canned query pages.

    Each entry in ``pages`` is either a response dict or a
    ``(status_code, body)`` tuple that makes that call fail.
    """

    def __init__(self, pages=None, database=None):
        self.pages = list(pages or [])
        self.database = database or {"properties": {}}
        self.calls = []
        self.retrieve_calls = 0
        self.closed = False

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def query_database(self, database_id, query_filter, page_size, start_cursor=None):
        self.calls.append(
            {
                "database_id": database_id,
                "filter": query_filter,
                "page_size": page_size,
                "start_cursor": start_cursor,
            }
        )
        page = self.pages[len(self.calls) - 1]
        if isinstance(page, tuple):
            status_code, body = page
            raise RemoteQueryError(status_code, body)
        return page

    def retrieve_database(self, database_id):
        self.retrieve_calls += 1
        return self.database


def make_page(
    status="📘",
    end_date="2026-02-14",
    title="Some Book",
    page_id="page-1",
    title_property="Name",
):
    """Raw Notion page with a rich_text status and a date end date."""
    return {
        "object": "page",
        "id": page_id,
        "properties": {
            title_property: {
                "type": "title",
                "title": [{"plain_text": title}],
            },
            "Status": {
                "type": "rich_text",
                "rich_text": [{"plain_text": status}] if status else [],
            },
            "End Date": {
                "type": "date",
                "date": {"start": end_date, "end": None} if end_date else None,
            },
        },
    }


def make_response(results, next_cursor=None):
    """Query response page; has_more follows the cursor."""
    return {
        "object": "list",
        "results": results,
        "has_more": next_cursor is not None,
        "next_cursor": next_cursor,
    }


@pytest.fixture
def settings():
    """Settings with test credentials and defaults."""
    return Settings(api_token="secret_test", database_id="db_123")


@pytest.fixture
def fake_client_factory():
    """Build FakeNotionClient instances."""
    return FakeNotionClient


@pytest.fixture
def notion_env(monkeypatch):
    """Set the required Notion credentials in the environment."""
    monkeypatch.setenv("API_TOKEN", "secret_test")
    monkeypatch.setenv("DATABASE_ID", "db_123")
    for name in (
        "NOTION_TOKEN",
        "NOTION_DATABASE_ID",
        "TZ_OFFSET_MINUTES",
        "END_DATE_PROPERTY_NAME",
        "STATUS_MATCH",
        "DATE_CHECK",
    ):
        monkeypatch.delenv(name, raising=False)
