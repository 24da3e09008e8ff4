from __future__ import annotations

from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.services.finance import DateRange, HealthExpenses, health_expenses


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    date_from: date | None = None,
    date_to: date | None = None,
) -> HealthExpenses:
    records = await uow.health_records.list(account_id, date_from=date_from, date_to=date_to)
    return health_expenses(records, DateRange(date_from, date_to))
