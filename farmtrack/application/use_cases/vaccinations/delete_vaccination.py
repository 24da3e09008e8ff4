from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, account_id: UUID, vaccination_id: UUID) -> None:
    deleted = await uow.vaccinations.delete(account_id, vaccination_id)
    if not deleted:
        raise NotFound("Vaccination not found")
    await uow.commit()
