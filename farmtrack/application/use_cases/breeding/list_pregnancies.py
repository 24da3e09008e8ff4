from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.insemination import Insemination
from farmtrack.domain.services.gestation import PregnancyProgress, pregnancy_progress


@dataclass(slots=True)
class PregnancyView:
    insemination: Insemination
    ear_tag: str | None
    species: str | None
    progress: PregnancyProgress | None


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    today: date,
    *,
    animal_id: UUID | None = None,
    only_pregnant: bool = True,
) -> list[PregnancyView]:
    inseminations = await uow.inseminations.list(
        account_id,
        animal_id=animal_id,
        is_pregnant=True if only_pregnant else None,
    )
    animals = {a.id: a for a in await uow.animals.list(account_id)}
    views: list[PregnancyView] = []
    for item in inseminations:
        animal = animals.get(item.animal_id)
        species = animal.species if animal else None
        progress = (
            pregnancy_progress(item.date, species or "other", today) if item.is_pregnant else None
        )
        views.append(
            PregnancyView(
                insemination=item,
                ear_tag=animal.ear_tag if animal else None,
                species=species,
                progress=progress,
            )
        )
    views.sort(key=lambda v: v.insemination.expected_birth_date)
    return views
