from __future__ import annotations

from datetime import date, datetime, timezone

from zoneinfo import ZoneInfo

# Default farm timezone; overridden per deployment through settings.timezone
DEFAULT_TIMEZONE_NAME = "Europe/Istanbul"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)


def resolve_tz(name: str | None) -> ZoneInfo:
    return ZoneInfo(name) if name else DEFAULT_TZ


def local_today(tz_name: str | None = None) -> date:
    """Return today's date on the farm-local calendar."""
    return datetime.now(timezone.utc).astimezone(resolve_tz(tz_name)).date()


_MONTHS_EN = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def format_day(d: date | None) -> str:
    """Return '05 Oct 2024'."""
    if d is None:
        return "-"
    return f"{d.day:02d} {_MONTHS_EN[d.month - 1]} {d.year}"


def format_month(d: date) -> str:
    """Return 'Oct 2024'."""
    return f"{_MONTHS_EN[d.month - 1]} {d.year}"
