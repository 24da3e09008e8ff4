from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.vaccination import Vaccination


@dataclass(slots=True)
class CreateVaccinationInput:
    animal_id: UUID
    name: str
    date: date
    next_date: date | None = None
    completed: bool = False
    notes: str | None = None


def validate_dates(given: date, next_date: date | None) -> None:
    if next_date is not None and next_date < given:
        raise ValidationError("Next dose cannot be before the administered date")


async def execute(
    uow: UnitOfWork, account_id: UUID, payload: CreateVaccinationInput
) -> Vaccination:
    name = payload.name.strip()
    if not name:
        raise ValidationError("Vaccine name is required")
    validate_dates(payload.date, payload.next_date)
    animal = await uow.animals.get(account_id, payload.animal_id)
    if not animal:
        raise NotFound("Animal not found")
    vaccination = Vaccination.create(
        account_id=account_id,
        animal_id=payload.animal_id,
        name=name,
        date=payload.date,
        next_date=payload.next_date,
        completed=payload.completed,
        notes=payload.notes,
    )
    created = await uow.vaccinations.add(vaccination)
    await uow.commit()
    return created
