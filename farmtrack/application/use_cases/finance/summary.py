from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.services.finance import (
    DateRange,
    FinancialSummary,
    MonthlyFinance,
    financial_summary,
    monthly_finance,
)


@dataclass(slots=True)
class FinanceOverview:
    summary: FinancialSummary
    monthly: list[MonthlyFinance]


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    today: date,
    *,
    date_from: date | None = None,
    date_to: date | None = None,
    months: int = 6,
) -> FinanceOverview:
    if date_from and date_to and date_from > date_to:
        raise ValidationError("date_from must be before date_to")
    transactions = await uow.transactions.list(account_id)
    return FinanceOverview(
        summary=financial_summary(transactions, DateRange(date_from, date_to)),
        monthly=monthly_finance(transactions, today, months),
    )
