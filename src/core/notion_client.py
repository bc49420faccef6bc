"""
Minimal Notion REST client for database queries.
"""

import logging
from typing import Any

import requests

from core.config import NOTION_API_BASE, NOTION_TIMEOUT_SECONDS, NOTION_VERSION, Settings
from core.exceptions import RemoteQueryError

logger = logging.getLogger(__name__)


class NotionClient:
    """Thin wrapper over the two database endpoints the counter needs."""

    def __init__(
        self,
        token: str,
        session: requests.Session | None = None,
        base_url: str = NOTION_API_BASE,
        timeout: float = NOTION_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Notion-Version": NOTION_VERSION,
                "Content-Type": "application/json",
            }
        )

    def close(self) -> None:
        """Release the session's pooled connections."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, body: dict | None = None) -> dict:
        url = f"{self.base_url}/{path}"
        resp = self.session.request(method, url, json=body, timeout=self.timeout)

        try:
            data: Any = resp.json()
        except ValueError:
            data = resp.text

        if not resp.ok:
            logger.warning("Notion %s %s failed with %s", method, path, resp.status_code)
            raise RemoteQueryError(resp.status_code, data)
        return data

    def query_database(
        self,
        database_id: str,
        query_filter: dict,
        page_size: int,
        start_cursor: str | None = None,
    ) -> dict:
        """
        Fetch one page of a database query.

        Returns:
            Raw response with ``results``, ``has_more`` and ``next_cursor``

        Raises:
            RemoteQueryError: on any non-success status
        """
        body: dict[str, Any] = {"page_size": page_size, "filter": query_filter}
        if start_cursor:
            body["start_cursor"] = start_cursor
        return self._request("POST", f"databases/{database_id}/query", body)

    def retrieve_database(self, database_id: str) -> dict:
        """Fetch database metadata (property names and types)."""
        return self._request("GET", f"databases/{database_id}")


def create_notion_client(settings: Settings) -> NotionClient:
    """Create a client authenticated with the configured token."""
    return NotionClient(settings.api_token)
