#!/usr/bin/env python3
"""
Count finished items in the Notion database for one month.

Prints the same JSON payload as GET /api/monthly.

Usage:
    uv run python src/scripts/count_monthly.py --month 2026-02 --debug
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import load_settings
from core.exceptions import RemoteQueryError
from core.month_window import compute_month_window, parse_month
from core.notion_client import create_notion_client
from services.monthly import count_finished, shape_result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Count finished Notion items for a calendar month"
    )
    parser.add_argument(
        "--month",
        help="Target month (YYYY-MM). Defaults to the current local month.",
    )
    parser.add_argument(
        "--tz",
        type=int,
        help="Offset from UTC in minutes. Defaults to TZ_OFFSET_MINUTES.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Include window bounds, filter and sample matches",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        year, month = parse_month(args.month) if args.month else (None, None)
        offset = settings.tz_offset_minutes if args.tz is None else args.tz

        window = compute_month_window(datetime.now(timezone.utc), offset, year, month)
        with create_notion_client(settings) as client:
            result = count_finished(client, settings, window, debug=args.debug)
    except RemoteQueryError as e:
        print(f"Notion error {e.status_code}: {json.dumps(e.body, ensure_ascii=False)}")
        return 1
    except Exception as e:
        print(f"\nError: {e}")
        return 1

    payload = shape_result(result, settings, window, debug=args.debug)
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
