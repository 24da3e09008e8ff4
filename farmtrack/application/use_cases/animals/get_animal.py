from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.animal import Animal


async def execute(uow: UnitOfWork, account_id: UUID, animal_id: UUID) -> Animal:
    animal = await uow.animals.get(account_id, animal_id)
    if not animal:
        raise NotFound("Animal not found")
    return animal
