from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, account_id: UUID, production_id: UUID) -> None:
    deleted = await uow.milk_productions.delete(account_id, production_id)
    if not deleted:
        raise NotFound("Milk production not found")
    await uow.commit()
