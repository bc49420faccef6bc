"""
Month boundaries in a fixed timezone offset.

The offset is a plain number of minutes east of UTC (``-480`` is UTC-8).
No DST rules are applied: callers pick the offset that is right for the
month they ask about.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone


@dataclass(frozen=True)
class MonthWindow:
    """Half-open UTC interval [start, end) covering one local calendar month."""

    start: datetime
    end: datetime
    year: int
    month: int
    offset_minutes: int

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def local_start_date(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def local_end_date(self) -> date:
        """First day of the following local month."""
        return _next_month(self.year, self.month)

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


def _next_month(year: int, month: int) -> date:
    if month == 12:
        return date(year + 1, 1, 1)
    return date(year, month + 1, 1)


def is_valid_override(year: int | None, month: int | None) -> bool:
    """Check an explicit year/month pair (both required)."""
    if year is None or month is None:
        return False
    return 1 <= year <= 9999 and 1 <= month <= 12


def _build_window(year: int, month: int, offset_minutes: int) -> MonthWindow:
    offset = timedelta(minutes=offset_minutes)
    following = _next_month(year, month)

    # Local midnights expressed as nominal UTC, then shifted back by the offset
    start = datetime(year, month, 1, tzinfo=timezone.utc) - offset
    end = datetime(following.year, following.month, 1, tzinfo=timezone.utc) - offset
    return MonthWindow(
        start=start,
        end=end,
        year=year,
        month=month,
        offset_minutes=offset_minutes,
    )


def compute_month_window(
    now: datetime,
    offset_minutes: int,
    year: int | None = None,
    month: int | None = None,
) -> MonthWindow:
    """
    Compute the month window for ``now`` or for an explicit year/month.

    Args:
        now: Current instant. Naive values are treated as UTC.
        offset_minutes: Fixed local offset from UTC in minutes.
        year: Optional override year (1-9999). Without a month it pairs with
            the current local month.
        month: Optional override month (1-12), ignored without a year.

    Returns:
        MonthWindow for the override when valid and representable, otherwise
        for the local month containing ``now``.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local = now.astimezone(timezone.utc) + timedelta(minutes=offset_minutes)
    if year is not None and month is None:
        month = local.month

    if is_valid_override(year, month):
        try:
            return _build_window(year, month, offset_minutes)
        except (OverflowError, ValueError):
            # Year 9999 December or year 1 January with a positive offset
            pass

    return _build_window(local.year, local.month, offset_minutes)


def parse_month(month_str: str) -> tuple[int, int]:
    """
    Parse a YYYY-MM string.

    Raises:
        ValueError: if the string is malformed or out of range
    """
    try:
        year_part, month_part = month_str.strip().split("-")
        year, month = int(year_part), int(month_part)
    except ValueError:
        raise ValueError(f"Expected YYYY-MM, got '{month_str}'")
    if not is_valid_override(year, month):
        raise ValueError(f"Month out of range: '{month_str}'")
    return year, month
