from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

from farmtrack.domain.models.milk_production import MilkProduction
from farmtrack.domain.models.transaction import Transaction
from farmtrack.domain.services.finance import (
    DateRange,
    financial_summary,
    monthly_finance,
    monthly_milk_income,
    split_total,
)
from farmtrack.domain.services.milk import milk_sale_amount, milk_summary

ACCOUNT = uuid4()
TODAY = date(2024, 7, 15)


def _tx(type_: str, category: str, amount: str, on: date) -> Transaction:
    return Transaction.create(
        account_id=ACCOUNT, type=type_, category=category, amount=Decimal(amount), date=on
    )


def _milk(on: date, morning: str, evening: str) -> MilkProduction:
    return MilkProduction.create(
        account_id=ACCOUNT,
        animal_id=uuid4(),
        date=on,
        morning_amount=Decimal(morning),
        evening_amount=Decimal(evening),
    )


def test_financial_summary_totals_and_balance():
    summary = financial_summary(
        [
            _tx("income", "sut", "100", TODAY),
            _tx("expense", "yem", "40", TODAY),
        ]
    )
    assert summary.total_income == Decimal("100")
    assert summary.total_expense == Decimal("40")
    assert summary.balance == Decimal("60")
    assert summary.income_by_category == {"sut": Decimal("100")}
    assert summary.expense_by_category == {"yem": Decimal("40")}


def test_financial_summary_respects_inclusive_range():
    items = [
        _tx("income", "sut", "10", date(2024, 6, 30)),
        _tx("income", "sut", "20", date(2024, 7, 1)),
        _tx("income", "sut", "30", date(2024, 7, 31)),
    ]
    summary = financial_summary(items, DateRange(date(2024, 7, 1), date(2024, 7, 31)))
    assert summary.total_income == Decimal("50")


def test_monthly_series_is_oldest_first():
    items = [
        _tx("income", "sut", "10", date(2024, 6, 3)),
        _tx("expense", "yem", "4", date(2024, 7, 3)),
    ]
    series = monthly_finance(items, TODAY, months=2)
    assert [m.month for m in series] == [date(2024, 6, 1), date(2024, 7, 1)]
    assert series[0].income == Decimal("10")
    assert series[1].balance == Decimal("-4")


def test_monthly_milk_income_counts_only_milk_sales_this_month():
    items = [
        _tx("income", "sut", "120", date(2024, 7, 2)),
        _tx("income", "et", "500", date(2024, 7, 2)),
        _tx("income", "sut", "90", date(2024, 6, 28)),
    ]
    assert monthly_milk_income(items, TODAY) == Decimal("120")


def test_milk_summary():
    records = [
        _milk(TODAY, "6", "4"),
        _milk(date(2024, 7, 14), "3", "3"),
        _milk(date(2024, 6, 30), "5", "0"),
    ]
    summary = milk_summary(records, TODAY, Decimal("30"))
    assert summary.total_today == Decimal("10")
    assert summary.total_this_month == Decimal("16")
    assert summary.days_with_production == 2
    assert summary.average_daily == Decimal("8.00")
    assert summary.potential_income == Decimal("480.00")
    assert len(summary.daily_totals) == 31
    assert list(summary.daily_totals)[0] == date(2024, 7, 1)
    assert summary.daily_totals[date(2024, 7, 1)] == Decimal("0")
    assert summary.daily_totals[date(2024, 7, 14)] == Decimal("6")
    assert summary.daily_totals[TODAY] == Decimal("10")


def test_milk_summary_without_records_is_zero():
    summary = milk_summary([], TODAY, Decimal("30"))
    assert summary.average_daily == Decimal("0")
    assert set(summary.daily_totals.values()) == {Decimal("0")}
    assert summary.days_with_production == 0
    assert summary.potential_income == Decimal("0.00")


def test_milk_sale_amount_rounds_to_cents():
    assert milk_sale_amount(Decimal("12.5"), Decimal("17.333")) == Decimal("216.66")


def test_financial_aggregation_is_repeatable():
    items = [
        _tx("income", "sut", "120.50", date(2024, 7, 2)),
        _tx("income", "hayvan-satis", "900", date(2024, 6, 12)),
        _tx("expense", "yem", "300", date(2024, 7, 5)),
        _tx("expense", "veteriner", "75.25", date(2024, 5, 20)),
    ]
    before = [(tx.type, tx.category, tx.amount, tx.date) for tx in items]

    first, second = financial_summary(items), financial_summary(items)
    assert (first.total_income, first.total_expense) == (second.total_income, second.total_expense)
    assert first.income_by_category == second.income_by_category
    assert first.expense_by_category == second.expense_by_category
    assert monthly_finance(items, TODAY) == monthly_finance(items, TODAY)
    assert [(tx.type, tx.category, tx.amount, tx.date) for tx in items] == before


def test_split_total_keeps_the_sum():
    assert split_total(Decimal("3000"), 3) == [Decimal("1000.00")] * 3
    assert split_total(Decimal("100"), 3) == [Decimal("33.33"), Decimal("33.33"), Decimal("33.34")]
    assert split_total(Decimal("0"), 2) == [Decimal("0.00"), Decimal("0.00")]
    assert sum(split_total(Decimal("1000.01"), 7)) == Decimal("1000.01")
