from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.animal import Animal
from farmtrack.domain.value_objects.animal_status import AnimalStatus


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    status: str | None = None,
    species: str | None = None,
    gender: str | None = None,
    search: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[Animal]:
    if status is not None and status not in {s.value for s in AnimalStatus}:
        raise ValidationError("Unknown animal status", details={"status": status})
    return await uow.animals.list(
        account_id,
        status=status,
        species=species,
        gender=gender,
        search=search,
        limit=limit,
        offset=offset,
    )
