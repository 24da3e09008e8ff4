"""Collects the record sets behind the reports page and its PDF exports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.settings import account_settings
from farmtrack.domain.models.animal import Animal
from farmtrack.domain.models.health_record import HealthRecord
from farmtrack.domain.models.milk_production import MilkProduction
from farmtrack.domain.services.activity import ActivityReport, activity_report
from farmtrack.domain.services.finance import (
    DateRange,
    FinancialSummary,
    HealthExpenses,
    financial_summary,
    health_expenses,
    monthly_milk_income,
)
from farmtrack.domain.services.milk import MilkSummary, milk_summary


@dataclass(slots=True)
class MilkReportData:
    month: date
    records: list[MilkProduction]
    ear_tags: dict[UUID, str]
    summary: MilkSummary
    total_income: Decimal


@dataclass(slots=True)
class HealthExpenseReportData:
    date_range: DateRange
    records: list[HealthRecord]
    ear_tags: dict[UUID, str]
    expenses: HealthExpenses


@dataclass(slots=True)
class FullReportData:
    today: date
    milk: MilkReportData
    health: HealthExpenseReportData
    finance: FinancialSummary
    activity: ActivityReport
    animals: list[Animal] = field(default_factory=list)
    vaccination_count: int = 0


async def _ear_tags(uow: UnitOfWork, account_id: UUID) -> dict[UUID, str]:
    return {a.id: a.ear_tag for a in await uow.animals.list(account_id)}


async def overview(uow: UnitOfWork, account_id: UUID, today: date) -> ActivityReport:
    animals = await uow.animals.list(account_id)
    vaccinations = await uow.vaccinations.list(account_id)
    inseminations = await uow.inseminations.list(account_id)
    return activity_report(animals, vaccinations, inseminations, today)


async def milk_report(
    uow: UnitOfWork, account_id: UUID, month: date, default_price: Decimal
) -> MilkReportData:
    window = DateRange.month_of(month)
    records = await uow.milk_productions.list(
        account_id, date_from=window.start, date_to=window.end
    )
    settings = await account_settings.get(uow, account_id, default_price)
    income = await uow.transactions.list(
        account_id, type="income", date_from=window.start, date_to=window.end
    )
    records.sort(key=lambda r: r.date)
    return MilkReportData(
        month=window.start,
        records=records,
        ear_tags=await _ear_tags(uow, account_id),
        # Month-scoped summary: "today" is the report month's last day
        summary=milk_summary(records, window.end, settings.milk_price_per_liter),
        total_income=monthly_milk_income(income, window.end),
    )


async def health_expense_report(
    uow: UnitOfWork,
    account_id: UUID,
    date_from: date | None = None,
    date_to: date | None = None,
) -> HealthExpenseReportData:
    if date_from and date_to and date_from > date_to:
        raise ValidationError("date_from must be before or equal to date_to")
    window = DateRange(date_from, date_to)
    records = await uow.health_records.list(account_id, date_from=date_from, date_to=date_to)
    records.sort(key=lambda r: r.date)
    return HealthExpenseReportData(
        date_range=window,
        records=records,
        ear_tags=await _ear_tags(uow, account_id),
        expenses=health_expenses(records, window),
    )


async def full_report(
    uow: UnitOfWork, account_id: UUID, today: date, default_price: Decimal
) -> FullReportData:
    animals = await uow.animals.list(account_id)
    vaccinations = await uow.vaccinations.list(account_id)
    inseminations = await uow.inseminations.list(account_id)
    transactions = await uow.transactions.list(account_id)
    return FullReportData(
        today=today,
        milk=await milk_report(uow, account_id, today, default_price),
        health=await health_expense_report(uow, account_id),
        finance=financial_summary(transactions),
        activity=activity_report(animals, vaccinations, inseminations, today),
        animals=animals,
        vaccination_count=len(vaccinations),
    )
