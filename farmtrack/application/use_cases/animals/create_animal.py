from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.animal import Animal
from farmtrack.domain.value_objects.species import Gender, Species


@dataclass(slots=True)
class CreateAnimalInput:
    ear_tag: str
    species: str
    breed: str
    gender: str
    birth_date: date
    mother_ear_tag: str | None = None
    notes: str | None = None
    profile_image_url: str | None = None


def validate_identity(species: str, gender: str) -> None:
    if species not in {s.value for s in Species}:
        raise ValidationError("Unknown species", details={"species": species})
    if gender not in {g.value for g in Gender}:
        raise ValidationError("Unknown gender", details={"gender": gender})


async def execute(uow: UnitOfWork, account_id: UUID, payload: CreateAnimalInput) -> Animal:
    ear_tag = payload.ear_tag.strip()
    if not ear_tag:
        raise ValidationError("Ear tag is required")
    validate_identity(payload.species, payload.gender)
    animal = Animal.create(
        account_id=account_id,
        ear_tag=ear_tag,
        species=payload.species,
        breed=payload.breed,
        gender=payload.gender,
        birth_date=payload.birth_date,
        mother_ear_tag=payload.mother_ear_tag,
        notes=payload.notes,
        profile_image_url=payload.profile_image_url,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return created
