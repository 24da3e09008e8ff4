from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from farmtrack.domain.models.milk_production import MilkProduction
from farmtrack.domain.services.calendar import month_bounds
from farmtrack.domain.services.finance import DateRange

ZERO = Decimal("0")
TWO_PLACES = Decimal("0.01")


@dataclass(slots=True)
class MilkSummary:
    total_today: Decimal = ZERO
    total_this_month: Decimal = ZERO
    average_daily: Decimal = ZERO
    days_with_production: int = 0
    price_per_liter: Decimal = ZERO
    daily_totals: dict[date, Decimal] = field(default_factory=dict)

    @property
    def potential_income(self) -> Decimal:
        """Advisory value of this month's volume; never reconciled with sales."""
        return (self.total_this_month * self.price_per_liter).quantize(TWO_PLACES, ROUND_HALF_UP)


def milk_summary(
    records: Iterable[MilkProduction], today: date, price_per_liter: Decimal
) -> MilkSummary:
    this_month = DateRange.month_of(today)
    summary = MilkSummary(price_per_liter=price_per_liter)
    # One entry per calendar day, zero when nothing was recorded
    first, last = month_bounds(today)
    for offset in range((last - first).days + 1):
        summary.daily_totals[first + timedelta(days=offset)] = ZERO
    for record in records:
        if record.date == today:
            summary.total_today += record.total_amount
        if this_month.contains(record.date):
            summary.total_this_month += record.total_amount
            summary.daily_totals[record.date] += record.total_amount
    producing_days = [d for d, total in summary.daily_totals.items() if total > 0]
    summary.days_with_production = len(producing_days)
    if producing_days:
        summary.average_daily = (
            summary.total_this_month / len(producing_days)
        ).quantize(TWO_PLACES, ROUND_HALF_UP)
    return summary


def milk_sale_amount(liters: Decimal, price_per_liter: Decimal) -> Decimal:
    return (liters * price_per_liter).quantize(TWO_PLACES, ROUND_HALF_UP)


def milk_sale_description(liters: Decimal, price_per_liter: Decimal) -> str:
    return f"Milk sale - {liters} liters x {price_per_liter}"
