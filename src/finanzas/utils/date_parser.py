"""Month, timestamp and timezone parsing utilities.

Months are returned 0-indexed (0 = January) to match the domain layer.
"""

import calendar
from datetime import datetime, timedelta, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz as dateutil_tz
from dateutil.relativedelta import relativedelta


def get_timezone(name: Optional[str] = None) -> tzinfo:
    """Resolve a timezone name into a tzinfo.

    Args:
        name: IANA name such as "America/Montevideo", "UTC", or None/"local"
            for the machine's local zone

    Returns:
        tzinfo instance

    Raises:
        ValueError: If the name is not a known timezone
    """
    if name is None or not name.strip() or name.strip().lower() == "local":
        return dateutil_tz.tzlocal()

    name = name.strip()
    if name.upper() == "UTC":
        return dateutil_tz.UTC

    zone = dateutil_tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone '{name}'")
    return zone


def current_month(tz: Optional[tzinfo] = None) -> tuple[int, int]:
    """Return (year, month) for now in the given timezone."""
    now = datetime.now(tz or dateutil_tz.tzlocal())
    return now.year, now.month - 1


def month_bounds(year: int, month: int, tz: Optional[tzinfo] = None) -> tuple[datetime, datetime]:
    """Return the first instant of a 0-indexed month and of the month after it.

    Both are midnight on the 1st in ``tz`` (default: local zone), so a
    timestamp belongs to the month when ``start <= timestamp < end``.
    """
    start = datetime(year, month + 1, 1, tzinfo=tz or dateutil_tz.tzlocal())
    return start, start + relativedelta(months=1)


def parse_month(month_str: str, tz: Optional[tzinfo] = None) -> tuple[int, int]:
    """Parse a month string into a (year, month) pair.

    Supports:
    - Absolute months: "2024-05", "May 2024", "2024/05"
    - Relative months: "this month", "last month", "next month"

    Args:
        month_str: Month string
        tz: Timezone that decides which month "this month" is

    Returns:
        Tuple of (year, 0-indexed month)

    Raises:
        ValueError: If month string cannot be parsed
    """
    month_str = month_str.strip().lower()
    year, month = current_month(tz)
    this_month = datetime(year, month + 1, 1)

    relative_months = {
        "this month": 0,
        "current": 0,
        "now": 0,
        "last month": -1,
        "previous": -1,
        "next month": 1,
    }

    if month_str in relative_months:
        target = this_month + relativedelta(months=relative_months[month_str])
        return target.year, target.month - 1

    # Try parsing as absolute month; missing day falls back to the 1st
    try:
        dt = date_parser.parse(month_str, default=this_month)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{month_str}': {e}")
    return dt.year, dt.month - 1


def parse_timestamp(date_str: str, tz: Optional[tzinfo] = None) -> datetime:
    """Parse a date or date-time string into a timezone-aware datetime.

    "now" and "today" give the current instant, "yesterday" the same time a
    day earlier. Values without an offset are interpreted in ``tz``.

    Raises:
        ValueError: If the string cannot be parsed
    """
    tz = tz or dateutil_tz.tzlocal()
    date_str = date_str.strip().lower()
    now = datetime.now(tz)

    relative_dates = {
        "now": now,
        "today": now,
        "yesterday": now - timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt


def format_month(year: int, month: int) -> str:
    """Return a display label such as "May 2024"."""
    return f"{calendar.month_name[month + 1]} {year}"
