from __future__ import annotations

from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.transaction import Transaction


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    type: str | None = None,
    category: str | None = None,
    animal_id: UUID | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[Transaction]:
    return await uow.transactions.list(
        account_id,
        type=type,
        category=category,
        animal_id=animal_id,
        date_from=date_from,
        date_to=date_to,
    )
