import pytest

from core.exceptions import RemoteQueryError
from core.notion_client import NotionClient


class FakeResp:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self.ok = status_code < 400
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("No JSON")
        return self._body


class FakeSession:
    def __init__(self, response):
        self.headers = {}
        self.response = response
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        return self.response


def test_query_database_sends_filter_and_headers() -> None:
    session = FakeSession(FakeResp(200, {"results": [], "has_more": False}))
    client = NotionClient("secret_abc", session=session, base_url="https://notion.test/v1/")

    data = client.query_database("db_1", {"and": []}, 100)

    assert data == {"results": [], "has_more": False}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://notion.test/v1/databases/db_1/query"
    assert call["json"] == {"page_size": 100, "filter": {"and": []}}
    assert call["timeout"] == client.timeout
    assert session.headers["Authorization"] == "Bearer secret_abc"
    assert session.headers["Notion-Version"] == "2022-06-28"


def test_query_database_passes_cursor() -> None:
    session = FakeSession(FakeResp(200, {"results": []}))
    client = NotionClient("tok", session=session)

    client.query_database("db_1", {}, 50, start_cursor="cursor-9")

    assert session.calls[0]["json"]["start_cursor"] == "cursor-9"


def test_retrieve_database() -> None:
    session = FakeSession(FakeResp(200, {"properties": {}}))
    client = NotionClient("tok", session=session, base_url="https://notion.test/v1")

    assert client.retrieve_database("db_1") == {"properties": {}}
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "https://notion.test/v1/databases/db_1"
    assert session.calls[0]["json"] is None


def test_error_status_raises_with_body() -> None:
    body = {"object": "error", "status": 404, "code": "object_not_found"}
    client = NotionClient("tok", session=FakeSession(FakeResp(404, body)))

    with pytest.raises(RemoteQueryError) as exc_info:
        client.query_database("db_1", {}, 100)

    assert exc_info.value.status_code == 404
    assert exc_info.value.body == body


def test_error_with_non_json_body_keeps_text() -> None:
    client = NotionClient("tok", session=FakeSession(FakeResp(502, None, "Bad gateway")))

    with pytest.raises(RemoteQueryError) as exc_info:
        client.query_database("db_1", {}, 100)

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "Bad gateway"
