from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_DOWN, Decimal
from typing import Iterable

from farmtrack.domain.models.health_record import HealthRecord
from farmtrack.domain.models.transaction import MILK_SALE_CATEGORY, Transaction, TransactionType
from farmtrack.domain.services.calendar import last_n_month_starts, month_bounds

ZERO = Decimal("0")
CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive date range; an open bound matches everything on that side."""

    start: date | None = None
    end: date | None = None

    def contains(self, d: date) -> bool:
        if self.start is not None and d < self.start:
            return False
        if self.end is not None and d > self.end:
            return False
        return True

    @classmethod
    def month_of(cls, d: date) -> DateRange:
        first, last = month_bounds(d)
        return cls(first, last)


@dataclass(slots=True)
class FinancialSummary:
    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO
    income_by_category: dict[str, Decimal] = field(default_factory=dict)
    expense_by_category: dict[str, Decimal] = field(default_factory=dict)

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expense


@dataclass(frozen=True, slots=True)
class MonthlyFinance:
    month: date
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


def financial_summary(
    transactions: Iterable[Transaction], date_range: DateRange | None = None
) -> FinancialSummary:
    date_range = date_range or DateRange()
    summary = FinancialSummary()
    for tx in transactions:
        if not date_range.contains(tx.date):
            continue
        if tx.type == TransactionType.INCOME.value:
            summary.total_income += tx.amount
            bucket = summary.income_by_category
        else:
            summary.total_expense += tx.amount
            bucket = summary.expense_by_category
        bucket[tx.category] = bucket.get(tx.category, ZERO) + tx.amount
    return summary


def monthly_finance(
    transactions: Iterable[Transaction], today: date, months: int = 6
) -> list[MonthlyFinance]:
    items = list(transactions)
    series: list[MonthlyFinance] = []
    for start in last_n_month_starts(today, months):
        summary = financial_summary(items, DateRange.month_of(start))
        series.append(
            MonthlyFinance(month=start, income=summary.total_income, expense=summary.total_expense)
        )
    return series


def monthly_milk_income(transactions: Iterable[Transaction], today: date) -> Decimal:
    this_month = DateRange.month_of(today)
    return sum(
        (
            tx.amount
            for tx in transactions
            if tx.type == TransactionType.INCOME.value
            and tx.category == MILK_SALE_CATEGORY
            and this_month.contains(tx.date)
        ),
        ZERO,
    )


@dataclass(slots=True)
class HealthExpenses:
    total: Decimal = ZERO
    by_type: dict[str, Decimal] = field(default_factory=dict)
    count: int = 0


def health_expenses(
    records: Iterable[HealthRecord], date_range: DateRange | None = None
) -> HealthExpenses:
    date_range = date_range or DateRange()
    result = HealthExpenses()
    for record in records:
        if not record.cost or not date_range.contains(record.date):
            continue
        result.total += record.cost
        result.by_type[record.record_type] = (
            result.by_type.get(record.record_type, ZERO) + record.cost
        )
        result.count += 1
    return result


def split_total(total: Decimal, parts: int) -> list[Decimal]:
    """Equal shares rounded down to cents; the last one absorbs the remainder.

    ``sum(split_total(t, n)) == t`` for any ``n >= 1``.
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")
    share = (total / parts).quantize(CENTS, rounding=ROUND_DOWN)
    return [share] * (parts - 1) + [total - share * (parts - 1)]
