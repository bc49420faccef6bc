#!/usr/bin/env python3
"""
List the properties of the configured Notion database.

Useful for checking END_DATE_PROPERTY_NAME / STATUS_PROPERTY_NAME.

Usage:
    uv run python src/scripts/list_properties.py
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import load_settings
from core.notion_client import create_notion_client
from services.monthly import list_properties


def main():
    """Print property names and types."""
    settings = load_settings()
    print(f"Fetching properties of database {settings.database_id}...\n")
    with create_notion_client(settings) as client:
        properties = list_properties(client, settings.database_id)

    print(f"Found {len(properties)} properties\n")
    print("=" * 80)
    for name, prop_type in properties.items():
        marker = ""
        if name == settings.end_date_property:
            marker = "  <- end date"
        elif name == settings.status_property:
            marker = "  <- status"
        print(f"  {name} | type={prop_type}{marker}")
    print("-" * 80)


if __name__ == "__main__":
    main()
