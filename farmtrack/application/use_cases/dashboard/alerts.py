from __future__ import annotations

from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.services.alerts import Alert, alert_feed


async def execute(uow: UnitOfWork, account_id: UUID, today: date) -> list[Alert]:
    pregnant = await uow.inseminations.list(account_id, is_pregnant=True)
    vaccinations = await uow.vaccinations.list(account_id)
    ear_tags = {a.id: a.ear_tag for a in await uow.animals.list(account_id)}
    return alert_feed(pregnant, vaccinations, today, ear_tags)
