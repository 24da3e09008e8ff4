from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, account_id: UUID, record_id: UUID) -> None:
    deleted = await uow.health_records.delete(account_id, record_id)
    if not deleted:
        raise NotFound("Health record not found")
    await uow.commit()
