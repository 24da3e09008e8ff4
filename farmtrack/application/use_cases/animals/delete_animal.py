from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, account_id: UUID, animal_id: UUID) -> None:
    deleted = await uow.animals.delete(account_id, animal_id)
    if not deleted:
        raise NotFound("Animal not found")
    await uow.commit()
