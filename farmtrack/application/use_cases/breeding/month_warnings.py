from __future__ import annotations

from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.services.gestation import MilkWarning, month_warnings


async def execute(uow: UnitOfWork, account_id: UUID, today: date) -> list[MilkWarning]:
    pregnant = await uow.inseminations.list(account_id, is_pregnant=True)
    ear_tags = {a.id: a.ear_tag for a in await uow.animals.list(account_id)}
    return month_warnings(pregnant, today, ear_tags)
