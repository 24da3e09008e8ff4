from __future__ import annotations

import calendar
from datetime import date


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(d: date, months: int) -> date:
    """Calendar month addition; the day is clamped to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(d.day, _days_in_month(year, month)))


def whole_months_between(start: date, end: date) -> int:
    """Number of complete calendar months from `start` to `end` (0 when end < start)."""
    if end <= start:
        return 0
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if add_months(start, months) > end:
        months -= 1
    return max(months, 0)


def days_between(start: date, end: date) -> int:
    return (end - start).days


def month_bounds(d: date) -> tuple[date, date]:
    first = d.replace(day=1)
    last = d.replace(day=_days_in_month(d.year, d.month))
    return first, last


def last_n_month_starts(today: date, months: int) -> list[date]:
    """First day of each of the last `months` calendar months, oldest first."""
    current = today.replace(day=1)
    return [add_months(current, -offset) for offset in range(months - 1, -1, -1)]
