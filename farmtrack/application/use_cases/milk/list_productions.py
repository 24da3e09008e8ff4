from __future__ import annotations

from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.milk_production import MilkProduction


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    animal_id: UUID | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[MilkProduction]:
    return await uow.milk_productions.list(
        account_id, animal_id=animal_id, date_from=date_from, date_to=date_to
    )
