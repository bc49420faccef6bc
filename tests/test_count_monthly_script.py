import json

from conftest import make_page, make_response
from scripts import count_monthly


def test_prints_count_for_month(notion_env, monkeypatch, capsys, fake_client_factory) -> None:
    fake = fake_client_factory([make_response([make_page(), make_page(page_id="p2")])])
    monkeypatch.setattr(count_monthly, "create_notion_client", lambda settings: fake)

    exit_code = count_monthly.main(["--month", "2026-02"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"count": 2, "month": "2026-02"}
    assert fake.closed
    assert fake.calls[0]["filter"]["and"][2]["date"] == {"before": "2026-03-01"}


def test_debug_with_tz(notion_env, monkeypatch, capsys, fake_client_factory) -> None:
    fake = fake_client_factory([make_response([make_page()])])
    monkeypatch.setattr(count_monthly, "create_notion_client", lambda settings: fake)

    count_monthly.main(["--month", "2026-02", "--tz", "0", "--debug"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["range"]["start"] == "2026-02-01T00:00:00+00:00"
    assert payload["matches"][0]["id"] == "page-1"


def test_remote_error_exits_nonzero(notion_env, monkeypatch, capsys, fake_client_factory) -> None:
    fake = fake_client_factory([(401, {"code": "unauthorized"})])
    monkeypatch.setattr(count_monthly, "create_notion_client", lambda settings: fake)

    assert count_monthly.main(["--month", "2026-02"]) == 1
    assert "Notion error 401" in capsys.readouterr().out
    assert fake.closed


def test_bad_month_exits_nonzero(notion_env, capsys) -> None:
    assert count_monthly.main(["--month", "Feb"]) == 1
    assert "Expected YYYY-MM" in capsys.readouterr().out
