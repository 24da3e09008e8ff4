from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.vaccinations.create_vaccination import validate_dates
from farmtrack.domain.models.vaccination import Vaccination

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BatchVaccinateInput:
    animal_ids: list[UUID]
    name: str
    date: date
    next_date: date | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, account_id: UUID, payload: BatchVaccinateInput
) -> list[Vaccination]:
    """Record the same vaccine for several animals; each record is marked completed."""
    name = payload.name.strip()
    if not name:
        raise ValidationError("Vaccine name is required")
    animal_ids = list(dict.fromkeys(payload.animal_ids))
    if not animal_ids:
        raise ValidationError("Select at least one animal")
    validate_dates(payload.date, payload.next_date)

    animals = await uow.animals.get_many(account_id, animal_ids)
    found = {a.id for a in animals}
    missing = [str(i) for i in animal_ids if i not in found]
    if missing:
        raise NotFound("Animal not found", details={"animal_ids": missing})

    created: list[Vaccination] = []
    for animal_id in animal_ids:
        vaccination = Vaccination.create(
            account_id=account_id,
            animal_id=animal_id,
            name=name,
            date=payload.date,
            next_date=payload.next_date,
            completed=True,
            notes=payload.notes,
        )
        created.append(await uow.vaccinations.add(vaccination))
    await uow.commit()
    logger.info("Recorded %s for %d animals", name, len(created))
    return created
