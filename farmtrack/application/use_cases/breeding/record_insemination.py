from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import ConflictError, NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.insemination import Insemination, InseminationMethod
from farmtrack.domain.models.pregnancy_reminder import PregnancyReminder
from farmtrack.domain.services.gestation import build_reminders, expected_birth_date
from farmtrack.domain.value_objects.species import Gender


@dataclass(slots=True)
class RecordInseminationInput:
    animal_id: UUID
    date: date
    method: str = InseminationMethod.ARTIFICIAL.value
    notes: str | None = None


@dataclass(slots=True)
class RecordInseminationResult:
    insemination: Insemination
    reminders: list[PregnancyReminder]


async def execute(
    uow: UnitOfWork, account_id: UUID, payload: RecordInseminationInput
) -> RecordInseminationResult:
    if payload.method not in {m.value for m in InseminationMethod}:
        raise ValidationError("Unknown insemination method", details={"method": payload.method})
    animal = await uow.animals.get(account_id, payload.animal_id)
    if not animal:
        raise NotFound("Animal not found")
    if animal.gender != Gender.FEMALE.value:
        raise ValidationError("Only female animals can be inseminated")
    if not animal.is_active:
        raise ConflictError(f"Animal {animal.ear_tag} is {animal.status}")

    insemination = Insemination.create(
        account_id=account_id,
        animal_id=animal.id,
        date=payload.date,
        method=payload.method,
        expected_birth_date=expected_birth_date(payload.date, animal.species),
        notes=payload.notes,
    )
    created = await uow.inseminations.add(insemination)
    reminders = [await uow.pregnancy_reminders.add(r) for r in build_reminders(created)]
    await uow.commit()
    return RecordInseminationResult(insemination=created, reminders=reminders)
