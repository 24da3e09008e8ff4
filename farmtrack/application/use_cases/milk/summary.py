from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.settings import account_settings
from farmtrack.domain.services.finance import DateRange, monthly_milk_income
from farmtrack.domain.services.milk import MilkSummary, milk_summary


@dataclass(slots=True)
class MilkOverview:
    summary: MilkSummary
    monthly_milk_income: Decimal


async def execute(
    uow: UnitOfWork, account_id: UUID, today: date, default_price: Decimal
) -> MilkOverview:
    settings = await account_settings.get(uow, account_id, default_price)
    month = DateRange.month_of(today)
    records = await uow.milk_productions.list(
        account_id, date_from=month.start, date_to=month.end
    )
    sales = await uow.transactions.list(
        account_id, type="income", date_from=month.start, date_to=month.end
    )
    return MilkOverview(
        summary=milk_summary(records, today, settings.milk_price_per_liter),
        monthly_milk_income=monthly_milk_income(sales, today),
    )
