import pytest

from core.config import MAX_PAGE_SIZE, Settings, load_settings
from core.exceptions import ConfigurationError
from core.filters import DateCheck, StatusMatch


def test_defaults() -> None:
    settings = load_settings({"API_TOKEN": "tok", "DATABASE_ID": "db"})
    assert settings == Settings(api_token="tok", database_id="db")
    assert settings.tz_offset_minutes == -480
    assert settings.end_date_property == "End Date"
    assert settings.status_match is StatusMatch.CONTAINS
    assert settings.date_check is DateCheck.REMOTE
    assert settings.page_size == MAX_PAGE_SIZE


def test_notion_names_are_accepted_as_fallback() -> None:
    settings = load_settings({"NOTION_TOKEN": "tok", "NOTION_DATABASE_ID": "db"})
    assert (settings.api_token, settings.database_id) == ("tok", "db")


@pytest.mark.parametrize(
    "environ",
    [
        {},
        {"API_TOKEN": "tok"},
        {"DATABASE_ID": "db"},
        {"API_TOKEN": "  ", "DATABASE_ID": "db"},
    ],
)
def test_missing_credentials(environ) -> None:
    with pytest.raises(ConfigurationError, match="Missing Notion env vars"):
        load_settings(environ)


def test_overrides() -> None:
    settings = load_settings(
        {
            "API_TOKEN": "tok",
            "DATABASE_ID": "db",
            "TZ_OFFSET_MINUTES": "540",
            "END_DATE_PROPERTY_NAME": "Finished On",
            "STATUS_PROPERTY_NAME": "State",
            "STATUS_MATCH": "FINISHED_OR_ARC",
            "DATE_CHECK": "local",
            "PAGE_SIZE": "500",
            "DEBUG_SAMPLE_LIMIT": "3",
        }
    )
    assert settings.tz_offset_minutes == 540
    assert settings.end_date_property == "Finished On"
    assert settings.status_property == "State"
    assert settings.status_match is StatusMatch.FINISHED_OR_ARC
    assert settings.date_check is DateCheck.LOCAL
    assert settings.page_size == MAX_PAGE_SIZE
    assert settings.sample_limit == 3


@pytest.mark.parametrize(
    "name,value",
    [
        ("TZ_OFFSET_MINUTES", "PST"),
        ("STATUS_MATCH", "fuzzy"),
        ("DATE_CHECK", "both"),
    ],
)
def test_invalid_optional_values(name, value) -> None:
    with pytest.raises(ConfigurationError, match=name):
        load_settings({"API_TOKEN": "tok", "DATABASE_ID": "db", name: value})
