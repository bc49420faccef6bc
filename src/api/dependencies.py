"""FastAPI dependencies for configuration and shared resources."""

from collections.abc import Iterator

from fastapi import Depends

from core.config import Settings, load_settings
from core.notion_client import NotionClient, create_notion_client


def get_settings() -> Settings:
    """
    Build settings from the environment for the current request.

    Raises:
        ConfigurationError: if the Notion token or database ID is missing
    """
    return load_settings()


def get_notion_client(settings: Settings = Depends(get_settings)) -> Iterator[NotionClient]:
    """Notion client for the current request, closed once the request is done."""
    client = create_notion_client(settings)
    try:
        yield client
    finally:
        client.close()
