from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import NotFound, StaleVersionError, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.animals.create_animal import validate_identity
from farmtrack.domain.models.animal import Animal


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    ear_tag: str | None = None
    species: str | None = None
    breed: str | None = None
    gender: str | None = None
    birth_date: date | None = None
    mother_ear_tag: str | None = None
    notes: str | None = None
    profile_image_url: str | None = None


EDITABLE_FIELDS = (
    "ear_tag",
    "species",
    "breed",
    "gender",
    "birth_date",
    "mother_ear_tag",
    "notes",
    "profile_image_url",
)


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    animal_id: UUID,
    payload: UpdateAnimalInput,
) -> Animal:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.animals.get(account_id, animal_id)
    if not existing:
        raise NotFound("Animal not found")
    data: dict = {}
    for field_name in EDITABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing
    validate_identity(data.get("species", existing.species), data.get("gender", existing.gender))
    updated = await uow.animals.update(
        account_id,
        animal_id,
        data=data,
        expected_version=payload.version,
    )
    if not updated:
        raise StaleVersionError("animal", animal_id, payload.version)
    await uow.commit()
    return updated
