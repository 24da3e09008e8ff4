from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, account_id: UUID, insemination_id: UUID) -> None:
    existing = await uow.inseminations.get(account_id, insemination_id)
    if not existing:
        raise NotFound("Insemination not found")
    await uow.pregnancy_reminders.delete_for_insemination(account_id, insemination_id)
    await uow.inseminations.delete(account_id, insemination_id)
    await uow.commit()
