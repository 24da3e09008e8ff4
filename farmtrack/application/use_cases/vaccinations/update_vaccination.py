from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.vaccinations.create_vaccination import validate_dates
from farmtrack.domain.models.vaccination import Vaccination


@dataclass(slots=True)
class UpdateVaccinationInput:
    name: str | None = None
    date: date | None = None
    next_date: date | None = None
    clear_next_date: bool = False
    completed: bool | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    vaccination_id: UUID,
    payload: UpdateVaccinationInput,
) -> Vaccination:
    vaccination = await uow.vaccinations.get(account_id, vaccination_id)
    if not vaccination:
        raise NotFound("Vaccination not found")
    if payload.name is not None:
        if not payload.name.strip():
            raise ValidationError("Vaccine name is required")
        vaccination.name = payload.name.strip()
    if payload.date is not None:
        vaccination.date = payload.date
    if payload.clear_next_date:
        vaccination.next_date = None
    elif payload.next_date is not None:
        vaccination.next_date = payload.next_date
    if payload.completed is not None:
        vaccination.completed = payload.completed
    if payload.notes is not None:
        vaccination.notes = payload.notes
    validate_dates(vaccination.date, vaccination.next_date)
    vaccination.bump_version()
    updated = await uow.vaccinations.update(vaccination)
    await uow.commit()
    return updated
