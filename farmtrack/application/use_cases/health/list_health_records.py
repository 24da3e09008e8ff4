from __future__ import annotations

from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.health_record import HealthRecord


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    animal_id: UUID | None = None,
    record_type: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[HealthRecord]:
    return await uow.health_records.list(
        account_id,
        animal_id=animal_id,
        record_type=record_type,
        date_from=date_from,
        date_to=date_to,
    )
